"""Portable error numbers in the libuv style: negative codes with fixed messages."""

from __future__ import annotations

import errno
import sys
from enum import IntEnum

__all__ = ["UvErrno", "UV_ERRNO_MAX"]

_ON_WINDOWS = sys.platform == "win32"
_ON_BSD_LIKE = sys.platform == "darwin" or sys.platform.startswith(
    ("freebsd", "netbsd", "openbsd", "dragonfly")
)


def _code(name: str, fallback: int) -> int:
    """Negated system errno when the platform defines it, else the fixed fallback."""
    value = getattr(errno, name, None)
    if value is not None and not _ON_WINDOWS:
        return -value
    return fallback


def _host_down() -> int:
    value = getattr(errno, "EHOSTDOWN", None)
    if value is not None and not _ON_WINDOWS:
        return -value
    if _ON_BSD_LIKE:
        return -64
    return -4031


_MESSAGES = {
    "E2BIG": "argument list too long",
    "EACCES": "permission denied",
    "EADDRINUSE": "address already in use",
    "EADDRNOTAVAIL": "address not available",
    "EAFNOSUPPORT": "address family not supported",
    "EAGAIN": "resource temporarily unavailable",
    "EAI_ADDRFAMILY": "address family not supported",
    "EAI_AGAIN": "temporary failure",
    "EAI_BADFLAGS": "bad ai_flags value",
    "EAI_BADHINTS": "invalid value for hints",
    "EAI_CANCELED": "request canceled",
    "EAI_FAIL": "permanent failure",
    "EAI_FAMILY": "ai_family not supported",
    "EAI_MEMORY": "out of memory",
    "EAI_NODATA": "no address",
    "EAI_NONAME": "unknown node or service",
    "EAI_OVERFLOW": "argument buffer overflow",
    "EAI_PROTOCOL": "resolved protocol is unknown",
    "EAI_SERVICE": "service not available for socket type",
    "EAI_SOCKTYPE": "socket type not supported",
    "EALREADY": "connection already in progress",
    "EBADF": "bad file descriptor",
    "EBUSY": "resource busy or locked",
    "ECANCELED": "operation canceled",
    "ECHARSET": "invalid Unicode character",
    "ECONNABORTED": "software caused connection abort",
    "ECONNREFUSED": "connection refused",
    "ECONNRESET": "connection reset by peer",
    "EDESTADDRREQ": "destination address required",
    "EEXIST": "file already exists",
    "EFAULT": "bad address in system call argument",
    "EFBIG": "file too large",
    "EHOSTUNREACH": "host is unreachable",
    "EINTR": "interrupted system call",
    "EINVAL": "invalid argument",
    "EIO": "i/o error",
    "EISCONN": "socket is already connected",
    "EISDIR": "illegal operation on a directory",
    "ELOOP": "too many symbolic links encountered",
    "EMFILE": "too many open files",
    "EMSGSIZE": "message too long",
    "ENAMETOOLONG": "name too long",
    "ENETDOWN": "network is down",
    "ENETUNREACH": "network is unreachable",
    "ENFILE": "file table overflow",
    "ENOBUFS": "no buffer space available",
    "ENODEV": "no such device",
    "ENOENT": "no such file or directory",
    "ENOMEM": "not enough memory",
    "ENONET": "machine is not on the network",
    "ENOPROTOOPT": "protocol not available",
    "ENOSPC": "no space left on device",
    "ENOSYS": "function not implemented",
    "ENOTCONN": "socket is not connected",
    "ENOTDIR": "not a directory",
    "ENOTEMPTY": "directory not empty",
    "ENOTSOCK": "socket operation on non-socket",
    "ENOTSUP": "operation not supported on socket",
    "EPERM": "operation not permitted",
    "EPIPE": "broken pipe",
    "EPROTO": "protocol error",
    "EPROTONOSUPPORT": "protocol not supported",
    "EPROTOTYPE": "protocol wrong type for socket",
    "ERANGE": "result too large",
    "EROFS": "read-only file system",
    "ESHUTDOWN": "cannot send after transport endpoint shutdown",
    "ESPIPE": "invalid seek",
    "ESRCH": "no such process",
    "ETIMEDOUT": "connection timed out",
    "ETXTBSY": "text file is busy",
    "EXDEV": "cross-device link not permitted",
    "UNKNOWN": "unknown error",
    "EOF": "end of file",
    "ENXIO": "no such device or address",
    "EMLINK": "too many links",
    "EHOSTDOWN": "host is down",
    "EREMOTEIO": "remote I/O error",
}


class UvErrno(IntEnum):
    """Negative error codes; system errno values where the platform has them."""

    E2BIG = _code("E2BIG", -4093)
    EACCES = _code("EACCES", -4092)
    EADDRINUSE = _code("EADDRINUSE", -4091)
    EADDRNOTAVAIL = _code("EADDRNOTAVAIL", -4090)
    EAFNOSUPPORT = _code("EAFNOSUPPORT", -4089)
    EAGAIN = _code("EAGAIN", -4088)
    EAI_ADDRFAMILY = -3000
    EAI_AGAIN = -3001
    EAI_BADFLAGS = -3002
    EAI_BADHINTS = -3013
    EAI_CANCELED = -3003
    EAI_FAIL = -3004
    EAI_FAMILY = -3005
    EAI_MEMORY = -3006
    EAI_NODATA = -3007
    EAI_NONAME = -3008
    EAI_OVERFLOW = -3009
    EAI_PROTOCOL = -3014
    EAI_SERVICE = -3010
    EAI_SOCKTYPE = -3011
    EALREADY = _code("EALREADY", -4084)
    EBADF = _code("EBADF", -4083)
    EBUSY = _code("EBUSY", -4082)
    ECANCELED = _code("ECANCELED", -4081)
    ECHARSET = _code("ECHARSET", -4080)
    ECONNABORTED = _code("ECONNABORTED", -4079)
    ECONNREFUSED = _code("ECONNREFUSED", -4078)
    ECONNRESET = _code("ECONNRESET", -4077)
    EDESTADDRREQ = _code("EDESTADDRREQ", -4076)
    EEXIST = _code("EEXIST", -4075)
    EFAULT = _code("EFAULT", -4074)
    EFBIG = _code("EFBIG", -4036)
    EHOSTUNREACH = _code("EHOSTUNREACH", -4073)
    EINTR = _code("EINTR", -4072)
    EINVAL = _code("EINVAL", -4071)
    EIO = _code("EIO", -4070)
    EISCONN = _code("EISCONN", -4069)
    EISDIR = _code("EISDIR", -4068)
    ELOOP = _code("ELOOP", -4067)
    EMFILE = _code("EMFILE", -4066)
    EMSGSIZE = _code("EMSGSIZE", -4065)
    ENAMETOOLONG = _code("ENAMETOOLONG", -4064)
    ENETDOWN = _code("ENETDOWN", -4063)
    ENETUNREACH = _code("ENETUNREACH", -4062)
    ENFILE = _code("ENFILE", -4061)
    ENOBUFS = _code("ENOBUFS", -4060)
    ENODEV = _code("ENODEV", -4059)
    ENOENT = _code("ENOENT", -4058)
    ENOMEM = _code("ENOMEM", -4057)
    ENONET = _code("ENONET", -4056)
    ENOPROTOOPT = _code("ENOPROTOOPT", -4035)
    ENOSPC = _code("ENOSPC", -4055)
    ENOSYS = _code("ENOSYS", -4054)
    ENOTCONN = _code("ENOTCONN", -4053)
    ENOTDIR = _code("ENOTDIR", -4052)
    ENOTEMPTY = _code("ENOTEMPTY", -4051)
    ENOTSOCK = _code("ENOTSOCK", -4050)
    ENOTSUP = _code("ENOTSUP", -4049)
    EPERM = _code("EPERM", -4048)
    EPIPE = _code("EPIPE", -4047)
    EPROTO = _code("EPROTO", -4046)
    EPROTONOSUPPORT = _code("EPROTONOSUPPORT", -4045)
    EPROTOTYPE = _code("EPROTOTYPE", -4044)
    ERANGE = _code("ERANGE", -4034)
    EROFS = _code("EROFS", -4043)
    ESHUTDOWN = _code("ESHUTDOWN", -4042)
    ESPIPE = _code("ESPIPE", -4041)
    ESRCH = _code("ESRCH", -4040)
    ETIMEDOUT = _code("ETIMEDOUT", -4039)
    ETXTBSY = _code("ETXTBSY", -4038)
    EXDEV = _code("EXDEV", -4037)
    UNKNOWN = -4094
    EOF = -4095
    ENXIO = _code("ENXIO", -4033)
    EMLINK = _code("EMLINK", -4032)
    EHOSTDOWN = _host_down()
    EREMOTEIO = _code("EREMOTEIO", -4030)

    def message(self) -> str:
        """Human-readable description of this error."""
        return _MESSAGES[self.name]


UV_ERRNO_MAX = UvErrno.EOF - 1