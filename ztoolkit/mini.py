"""A small INI reader and writer keyed by ``section.name``."""

from __future__ import annotations

import re
import threading
from typing import Any, Callable, Optional, TypeVar

from ztoolkit.util import exe_path, trim

__all__ = ["Variant", "Ini"]

K = TypeVar("K")

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_WORD_RE = re.compile(r"\s*(\S+)")

DEFAULT_HEADER = "; auto-generated by mINI class {"
DEFAULT_FOOTER = "; } ---"


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


class Variant(str):
    """A string value that converts to other types the way a text stream reads them."""

    def __new__(cls, value: Any = "") -> "Variant":
        return super().__new__(cls, _to_text(value))

    def to(self, kind: Callable[..., K]) -> K:
        """Read a ``kind`` from the leading text; its default when nothing can be read."""
        if kind is bool:
            match = _INT_RE.match(self)
            return bool(match) and int(match.group(1)) == 1
        if kind is int:
            match = _INT_RE.match(self)
            return int(match.group(1)) if match else 0
        if kind is float:
            match = _FLOAT_RE.match(self)
            return float(match.group(1)) if match else 0.0
        if kind is str:
            match = _WORD_RE.match(self)
            return match.group(1) if match else ""
        try:
            return kind(str(self))
        except (ValueError, TypeError):
            return kind()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str.__eq__(self, other)
        return str.__eq__(self, _to_text(other))

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__


def _tokenize(text: str, delims: str) -> list[str]:
    return [piece for piece in re.split("[" + re.escape(delims) + "]", text) if piece]


class Ini(dict):
    """Mapping of ``"section.name"`` keys to :class:`Variant` values."""

    _instance: Optional["Ini"] = None
    _instance_lock = threading.Lock()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key, Variant(value))

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def parse(self, text: str) -> None:
        """Add the entries of INI ``text``; later keys overwrite earlier ones."""
        tag = ""
        for raw in _tokenize(text, "\n"):
            line = trim(raw)
            if not line or line[0] in ";#":
                continue
            if len(line) >= 3 and line[0] == "[" and line[-1] == "]":
                tag = trim(line[1:-1])
                continue
            name, sep, value = line.partition("=")
            self[trim(tag + "." + name)] = trim(value) if sep else ""

    def parse_file(self, file_name: Optional[str] = None) -> None:
        """Parse the file ``file_name`` (the program path plus ``.ini`` by default)."""
        if file_name is None:
            file_name = exe_path() + ".ini"
        try:
            with open(file_name, encoding="utf-8", errors="surrogateescape", newline="") as fh:
                text = fh.read()
        except OSError as exc:
            raise ValueError(f"invalid ini file:{file_name}") from exc
        self.parse(text)

    def dump(self, header: str = DEFAULT_HEADER, footer: str = DEFAULT_FOOTER) -> str:
        """Render all entries as INI text, sections in key order, CRLF line ends."""
        parts = [header + ("\r\n" if header else "")]
        tag = ""
        for key in sorted(self):
            section, _, name = key.partition(".")
            if section != tag:
                tag = section
                parts.append(f"\r\n[{tag}]\r\n")
            parts.append(f"{name}={self[key]}\r\n")
        parts.append("\r\n" + footer + ("\r\n" if footer else ""))
        return "".join(parts)

    def dump_file(self, file_name: Optional[str] = None) -> None:
        """Write :meth:`dump` to ``file_name`` (the program path plus ``.ini`` by default)."""
        if file_name is None:
            file_name = exe_path() + ".ini"
        with open(file_name, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(self.dump())

    @classmethod
    def instance(cls) -> "Ini":
        """The process-wide shared configuration."""
        with Ini._instance_lock:
            if Ini._instance is None:
                Ini._instance = Ini()
            return Ini._instance