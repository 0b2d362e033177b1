"""Interactive menu for the book catalogue."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from libraryshelf.catalog import (
    AlreadyBorrowedError,
    Book,
    BookNotFoundError,
    Library,
    LibraryError,
    NotBorrowedError,
)

MENU = (
    "\n--- Library Menu ---\n"
    "1. Add Book\n"
    "2. List Books\n"
    "3. Borrow Book\n"
    "4. Return Book\n"
    "5. Delete book \n"
    "0. Exit\n"
    "Choice: "
)


def format_book(book: Book) -> str:
    """Render one book the way the listing shows it."""
    return f"Title: {book.title}\nAuthor: {book.author}\nStatus: {book.status}\n---\n"


def _read_line(stdin: TextIO) -> Optional[str]:
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\n")


def _read_choice(stdin: TextIO) -> Optional[int]:
    while True:
        line = _read_line(stdin)
        if line is None:
            return None
        if line.strip():
            break
    try:
        return int(line.split()[0])
    except ValueError:
        return None


def _prompt(stdin: TextIO, stdout: TextIO, text: str) -> str:
    stdout.write(text)
    return _read_line(stdin) or ""


def _add(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    title = _prompt(stdin, stdout, "Title : ")
    author = _prompt(stdin, stdout, "Author : ")
    library.add_book(title, author)
    stdout.write(f"-[{title}]-> added to database.\n")


def _list(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n--- Books in Library ---\n")
    for book in library.books():
        stdout.write(format_book(book))


def _borrow(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    title = _prompt(stdin, stdout, "Book title to borrow : ")
    try:
        library.borrow_book(title)
    except BookNotFoundError:
        stdout.write("Book not found.\n")
    except AlreadyBorrowedError:
        stdout.write(f"-[{title}]-> is already borrowed.\n")
    else:
        stdout.write(f"-[{title}]-> borrowed.\n")


def _return(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    title = _prompt(stdin, stdout, "Book title to return : ")
    try:
        library.return_book(title)
    except BookNotFoundError:
        stdout.write("Book not found. \n")
    except NotBorrowedError:
        stdout.write(f"-[{title}]-> Was not borrowed.\n")
    else:
        stdout.write(f"-[{title}]-> Returned.\n")


def _delete(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    title = _prompt(stdin, stdout, "Book title to delete : ")
    try:
        library.delete_book(title)
    except BookNotFoundError:
        stdout.write("book not found to delete. \n")
    else:
        stdout.write(f"-[{title}]-> deleted from library.\n")


_ACTIONS = {1: _add, 2: _list, 3: _borrow, 4: _return, 5: _delete}


def run_menu(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user chooses 0 or input ends."""
    while True:
        stdout.write(MENU)
        choice = _read_choice(stdin)
        if not choice:
            break
        action = _ACTIONS.get(choice)
        if action is None:
            stdout.write("Invalid choice!\n")
            continue
        try:
            action(library, stdin, stdout)
        except LibraryError as exc:
            stdout.write(f"{exc}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the library database and run the menu on the terminal."""
    parser = argparse.ArgumentParser(description="Manage a small book library.")
    parser.add_argument("database", nargs="?", default="Library.db")
    args = parser.parse_args(argv)
    try:
        with Library(args.database) as library:
            run_menu(library, sys.stdin, sys.stdout)
    except LibraryError as exc:
        print(f"Fatal :{exc}", file=sys.stderr)
    sys.stdout.write("exiting ... \n")
    return 0


if __name__ == "__main__":
    sys.exit(main())