"""Book catalogue stored in an SQLite database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Union

_SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    author TEXT NOT NULL,
    available INTEGER NOT NULL CHECK(available IN (0,1))
);
"""


class LibraryError(Exception):
    """Raised when the library database cannot do what was asked."""


class BookNotFoundError(LibraryError):
    """Raised when no book has the given title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"book not found: {title!r}")
        self.title = title


class AlreadyBorrowedError(LibraryError):
    """Raised when borrowing a book that is already out."""

    def __init__(self, title: str) -> None:
        super().__init__(f"{title!r} is already borrowed")
        self.title = title


class NotBorrowedError(LibraryError):
    """Raised when returning a book that was not borrowed."""

    def __init__(self, title: str) -> None:
        super().__init__(f"{title!r} was not borrowed")
        self.title = title


@dataclass(frozen=True)
class Book:
    """One book in the catalogue."""

    id: int
    title: str
    author: str
    available: bool

    @property
    def status(self) -> str:
        return "Available" if self.available else "Borrowed"


class Library:
    """A catalogue of books kept in an SQLite file."""

    def __init__(self, path: Union[str, "PathLike[str]"]) -> None:
        try:
            self._conn = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise LibraryError(f"Cannot open database: {exc}") from exc
        try:
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            self._conn.close()
            raise LibraryError(f"create table failed: {exc}") from exc

    def add_book(self, title: str, author: str) -> Book:
        """Add an available book and return it."""
        try:
            cursor = self._conn.execute(
                "INSERT INTO books (title, author, available) VALUES (?, ?, 1)",
                (title, author),
            )
        except sqlite3.Error as exc:
            raise LibraryError(f"Insert failed: {exc}") from exc
        return Book(cursor.lastrowid, title, author, True)

    def books(self) -> list[Book]:
        """Return every book in insertion order."""
        try:
            rows = self._conn.execute(
                "SELECT id, title, author, available FROM books ORDER BY id"
            ).fetchall()
        except sqlite3.Error as exc:
            raise LibraryError(f"list query failed: {exc}") from exc
        return [Book(row[0], row[1], row[2], row[3] == 1) for row in rows]

    def _availability(self, title: str) -> bool:
        try:
            row = self._conn.execute(
                "SELECT available FROM books WHERE title = ?", (title,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise LibraryError(f"Select failed: {exc}") from exc
        if row is None:
            raise BookNotFoundError(title)
        return row[0] == 1

    def _set_available(self, title: str, available: bool) -> None:
        try:
            self._conn.execute(
                "UPDATE books SET available = ? WHERE title = ?",
                (1 if available else 0, title),
            )
        except sqlite3.Error as exc:
            raise LibraryError(f"Update failed: {exc}") from exc

    def borrow_book(self, title: str) -> None:
        """Mark the book with this exact title as borrowed."""
        if not self._availability(title):
            raise AlreadyBorrowedError(title)
        self._set_available(title, False)

    def return_book(self, title: str) -> None:
        """Mark the book with this exact title as available again."""
        if self._availability(title):
            raise NotBorrowedError(title)
        self._set_available(title, True)

    def delete_book(self, title: str) -> int:
        """Delete books whose title matches, ignoring case; return how many."""
        try:
            cursor = self._conn.execute(
                "DELETE FROM books WHERE title = ? COLLATE NOCASE", (title,)
            )
        except sqlite3.Error as exc:
            raise LibraryError(f"Delete failed: {exc}") from exc
        if cursor.rowcount <= 0:
            raise BookNotFoundError(title)
        return cursor.rowcount

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> "Library":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()