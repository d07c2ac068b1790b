"""General helpers: strings, hex dumps, clocks, paths and thread naming."""

from __future__ import annotations

import logging
import os
import random
import socket
import string
import sys
import threading
import time

__all__ = [
    "make_rand_str",
    "hexdump",
    "hexmem",
    "exe_path",
    "exe_dir",
    "exe_name",
    "split",
    "trim",
    "replace",
    "start_with",
    "end_with",
    "is_ip",
    "current_millisecond",
    "current_microsecond",
    "get_time_str",
    "local_time",
    "set_thread_name",
    "get_thread_name",
    "set_thread_affinity",
]

_log = logging.getLogger(__name__)

_PRINTABLE_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase
_DEFAULT_TRIM = " \r\n\t"
_TIME_STR_LIMIT = 64
_BROADCAST_PACKED = b"\xff\xff\xff\xff"

# Reference point of the steady clock; it never goes backwards.
_STEADY_ORIGIN_NS = time.monotonic_ns()


def make_rand_str(size: int, printable: bool = True) -> str:
    """Return a random string of ``size`` characters.

    With ``printable`` the characters are digits and ASCII letters; otherwise
    each character has a code point in the range 0..254.
    """
    if printable:
        return "".join(random.choice(_PRINTABLE_CHARS) for _ in range(size))
    return "".join(chr(random.randrange(0xFF)) for _ in range(size))


def _is_safe(byte: int) -> bool:
    return 32 <= byte < 128


def hexdump(data: bytes) -> str:
    """Render ``data`` as a classic 16-bytes-per-line hex and ASCII dump."""
    lines = ["\r\n"]
    for start in range(0, len(data), 16):
        chunk = data[start:start + 16]
        hex_part = "".join(f"{b:02x} " for b in chunk).ljust(16 * 3)
        text_part = "".join(chr(b) if _is_safe(b) else "." for b in chunk).ljust(16)
        lines.append(f"{hex_part}{text_part}\n")
    return "".join(lines)


def hexmem(data: bytes) -> str:
    """Render ``data`` as space-terminated lower-case hex pairs."""
    return "".join(f"{b:02x} " for b in data)


def exe_path(is_exe: bool = True) -> str:
    """Absolute path of the running program, or of this library when not ``is_exe``."""
    try:
        if is_exe:
            target = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        else:
            target = __file__
        path = os.path.realpath(target) if target else ""
    except (OSError, ValueError):
        path = ""
    if not path:
        return "./"
    return path.replace("\\", "/")


def exe_dir(is_exe: bool = True) -> str:
    """Directory of :func:`exe_path`, with a trailing slash."""
    path = exe_path(is_exe)
    return path[:path.rfind("/") + 1]


def exe_name(is_exe: bool = True) -> str:
    """File name part of :func:`exe_path`."""
    path = exe_path(is_exe)
    return path[path.rfind("/") + 1:]


def split(s: str, delim: str) -> list[str]:
    """Split ``s`` on ``delim``, dropping empty pieces; an empty input gives ``[""]``."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    if not s:
        return [""]
    return [piece for piece in s.split(delim) if piece]


def trim(s: str, chars: str = _DEFAULT_TRIM) -> str:
    """Strip any of ``chars`` from both ends of ``s``."""
    return s.strip(chars)


def replace(s: str, old: str, new: str) -> str:
    """Replace ``old`` with ``new`` repeatedly until ``old`` no longer occurs."""
    if not old or old == new:
        return s
    if old in new:
        raise ValueError("replacement contains the searched text; it would never end")
    while old in s:
        s = s.replace(old, new, 1)
    return s


def start_with(s: str, prefix: str) -> bool:
    """Whether ``s`` starts with ``prefix``."""
    return s.startswith(prefix)


def end_with(s: str, suffix: str) -> bool:
    """Whether ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def is_ip(s: str) -> bool:
    """Whether ``s`` parses as an IPv4 address other than the broadcast address."""
    try:
        packed = socket.inet_aton(s)
    except (OSError, ValueError, TypeError):
        return False
    return packed != _BROADCAST_PACKED


def current_microsecond(system_time: bool = False) -> int:
    """Microseconds: wall-clock since the epoch, or steady time since start-up."""
    if system_time:
        return time.time_ns() // 1_000
    return (time.monotonic_ns() - _STEADY_ORIGIN_NS) // 1_000


def current_millisecond(system_time: bool = False) -> int:
    """Milliseconds: wall-clock since the epoch, or steady time since start-up."""
    return current_microsecond(system_time) // 1_000


def get_time_str(fmt: str, timestamp: float = 0) -> str:
    """Format ``timestamp`` (now when 0) in local time; return ``fmt`` if it cannot fit."""
    if not timestamp:
        timestamp = time.time()
    result = time.strftime(fmt, local_time(timestamp))
    if not result or len(result) >= _TIME_STR_LIMIT:
        return fmt
    return result


def local_time(sec: float) -> time.struct_time:
    """Local broken-down time of a Unix timestamp."""
    return time.localtime(sec)


def set_thread_name(name: str) -> None:
    """Name the calling thread."""
    threading.current_thread().name = name


def get_thread_name() -> str:
    """Name of the calling thread, or its identifier when it has none."""
    thread = threading.current_thread()
    return thread.name or str(threading.get_ident())


def set_thread_affinity(cpu: int) -> bool:
    """Bind the calling thread to ``cpu``; a negative value removes the binding.

    Returns whether the operating system accepted the request.
    """
    setter = getattr(os, "sched_setaffinity", None)
    if setter is None:
        return False
    if cpu >= 0:
        mask = {cpu}
    else:
        mask = set(range(os.cpu_count() or 1))
    try:
        setter(0, mask)
    except (OSError, ValueError, OverflowError) as exc:
        _log.warning("sched_setaffinity failed: %s", exc)
        return False
    return True