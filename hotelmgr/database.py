"""SQLite connection handling shared by the rest of the package."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional


class HotelError(Exception):
    """Base class for every error raised by the hotel package."""


class Database:
    """A single SQLite connection with reentrant transactions.

    The connection is opened on construction and reopened on demand
    if it has been closed in the meantime.
    """

    def __init__(self, path: str = ":memory:") -> None:
        self.path = str(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._depth = 0
        self._open()

    def _open(self) -> sqlite3.Connection:
        if self._conn is None:
            try:
                self._conn = sqlite3.connect(self.path, isolation_level=None)
            except sqlite3.Error as exc:
                raise HotelError(f"database could not be opened: {exc}") from exc
        return self._conn

    @property
    def is_open(self) -> bool:
        """Whether the underlying connection is currently open."""
        return self._conn is not None

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            self._depth = 0

    def __enter__(self) -> "Database":
        self._open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection inside a transaction.

        Nested uses join the outermost transaction; only the outermost
        one commits, and any failure rolls the whole of it back.
        SQLite errors are raised as :class:`HotelError`.
        """
        conn = self._open()
        outermost = self._depth == 0
        if outermost:
            conn.execute("BEGIN")
        self._depth += 1
        try:
            yield conn
        except sqlite3.Error as exc:
            self._depth -= 1
            if outermost:
                conn.rollback()
            raise HotelError(str(exc)) from exc
        except BaseException:
            self._depth -= 1
            if outermost:
                conn.rollback()
            raise
        else:
            self._depth -= 1
            if outermost:
                try:
                    conn.commit()
                except sqlite3.Error as exc:
                    conn.rollback()
                    raise HotelError(str(exc)) from exc