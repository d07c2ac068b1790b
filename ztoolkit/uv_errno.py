"""Names and messages for libuv-style error codes, and errno translation."""

from __future__ import annotations

import errno
from typing import Optional

from ztoolkit.errcodes import UvErrno

__all__ = [
    "err_name",
    "strerror",
    "translate_posix_error",
    "uv_error_from_exception",
    "uv_errmsg",
]

# Codes that mean "try again" on one platform or another; all become EAGAIN.
_AGAIN_ALIASES = frozenset(
    code
    for code in (
        getattr(errno, "ENOBUFS", None),
        getattr(errno, "EINPROGRESS", None),
        getattr(errno, "EWOULDBLOCK", None),
    )
    if code is not None
)


def _unknown(err: int) -> str:
    return f"Unknown system error {err}"


def _lookup(err: int) -> Optional[UvErrno]:
    try:
        return UvErrno(err)
    except ValueError:
        return None


def err_name(err: int) -> str:
    """Symbolic name of ``err``, such as ``"EINVAL"``."""
    member = _lookup(err)
    return member.name if member is not None else _unknown(err)


def strerror(err: int) -> str:
    """Human-readable message for ``err``."""
    member = _lookup(err)
    return member.message() if member is not None else _unknown(err)


def translate_posix_error(err: int) -> int:
    """Turn a positive system errno into a negative code; non-positive values pass through.

    ENOBUFS, EINPROGRESS and EWOULDBLOCK are all reported as EAGAIN.
    """
    if err <= 0:
        return err
    if err in _AGAIN_ALIASES:
        err = errno.EAGAIN
    return -err


def uv_error_from_exception(exc: BaseException) -> int:
    """Negative error code for the system error carried by ``exc``.

    An exception without an errno gives :attr:`UvErrno.UNKNOWN`.
    """
    system_errno = getattr(exc, "errno", None)
    if system_errno is None:
        return int(UvErrno.UNKNOWN)
    code = translate_posix_error(system_errno)
    if code < 0:
        name = errno.errorcode.get(-code)
        if name is not None and name in UvErrno.__members__:
            return int(UvErrno[name])
    return code


def uv_errmsg(exc: BaseException) -> str:
    """Message describing the system error carried by ``exc``."""
    return strerror(uv_error_from_exception(exc))