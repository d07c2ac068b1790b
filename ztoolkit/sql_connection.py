"""A MySQL connection that runs printf-style queries and returns text rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

import pymysql
import pymysql.converters

__all__ = ["SqlError", "QueryResult", "SqlConnection", "query_string"]

_CONNECT_TIMEOUT = 3
_DEFAULT_CHARSET = "utf8mb4"

# Keep the encoders but drop every decoder, so all values arrive as text.
_TEXT_CONVERSIONS = {
    key: value
    for key, value in pymysql.converters.conversions.items()
    if not isinstance(key, int)
}


class SqlError(Exception):
    """A database failure, with the statement that caused it."""

    def __init__(self, sql: str, err: str) -> None:
        super().__init__(err)
        self.sql = sql
        self.err = err

    def __str__(self) -> str:
        return self.err


@dataclass
class QueryResult:
    """Rows returned by a statement, with its affected-row count and insert id."""

    rows: list = field(default_factory=list)
    affected_rows: int = 0
    row_id: int = 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def query_string(fmt: str, *args: Any) -> str:
    """Fill a printf-style ``fmt`` with ``args``; without arguments ``fmt`` is used as is."""
    if not args:
        return fmt
    return fmt % args


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="surrogateescape")
    return str(value)


class SqlConnection:
    """One connection to a MySQL server."""

    def __init__(
        self,
        url: str,
        port: int,
        dbname: str,
        username: str,
        password: str,
        character: str = _DEFAULT_CHARSET,
    ) -> None:
        try:
            self._conn = pymysql.connect(
                host=url,
                port=port,
                user=username,
                password=password,
                database=dbname or None,
                charset=character,
                connect_timeout=_CONNECT_TIMEOUT,
                autocommit=True,
                conv=_TEXT_CONVERSIONS,
            )
        except (pymysql.MySQLError, OSError) as exc:
            raise SqlError("mysql_real_connect", str(exc)) from exc

    def _check(self) -> Any:
        conn = self._conn
        if conn is None:
            raise SqlError("mysql_ping", "MySQL connection lost")
        try:
            conn.ping(reconnect=True)
        except (pymysql.MySQLError, OSError) as exc:
            raise SqlError("mysql_ping", "MySQL connection lost") from exc
        return conn

    def _run(self, sql: str) -> tuple[Optional[list], list, int, int]:
        conn = self._check()
        try:
            with conn.cursor() as cursor:
                cursor.execute(sql)
                description = cursor.description
                rows = list(cursor.fetchall()) if description else []
                return description, rows, cursor.rowcount, cursor.lastrowid or 0
        except (pymysql.MySQLError, OSError) as exc:
            raise SqlError(sql, str(exc)) from exc

    def execute(self, fmt: str, *args: Any) -> QueryResult:
        """Run a printf-style statement; rows come back as lists of strings."""
        _, rows, affected, row_id = self._run(query_string(fmt, *args))
        return QueryResult([[_text(value) for value in row] for row in rows], affected, row_id)

    def query_dicts(self, fmt: str, *args: Any) -> QueryResult:
        """Run a printf-style statement; rows come back as column-name dictionaries."""
        description, rows, affected, row_id = self._run(query_string(fmt, *args))
        names = [column[0] for column in description] if description else []
        return QueryResult(
            [{name: _text(value) for name, value in zip(names, row)} for row in rows],
            affected,
            row_id,
        )

    def escape(self, s: str) -> str:
        """Escape ``s`` for use inside a quoted SQL string."""
        if self._conn is None:
            raise SqlError("mysql_real_escape_string", "MySQL connection lost")
        return self._conn.escape_string(s)

    def close(self) -> None:
        """Close the connection; further calls do nothing."""
        conn, self._conn = self._conn, None
        if conn is not None:
            conn.close()

    def __enter__(self) -> "SqlConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()