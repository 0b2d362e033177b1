# libraryshelf

libraryshelf keeps a small book catalogue in an SQLite database file. For each
book it stores a title, an author and whether the book is on the shelf or out
on loan. You can run it as an interactive menu in the terminal or use it from
Python.

It needs nothing beyond the Python standard library.

## Installation

```
pip install .
```

## Using the menu

```
libraryshelf [database]
```

This opens the SQLite file `database` and creates it if it does not exist. If
you give no file, it uses `Library.db` in the current directory. Then it shows
a menu:

```
--- Library Menu ---
1. Add Book
2. List Books
3. Borrow Book
4. Return Book
5. Delete book
0. Exit
Choice:
```

- **Add Book** asks for a title and an author. The new book starts as available.
- **List Books** shows every book in the order it was added, with its title, its
  author and a status of `Available` or `Borrowed`.
- **Borrow Book** asks for a title and marks that book as borrowed. The title
  must match exactly, including letter case. The menu tells you if the book is
  already out or if no book has that title.
- **Return Book** asks for a title and marks that borrowed book as available
  again. The title must match exactly. The menu tells you if the book was not
  borrowed or if no book has that title.
- **Delete book** removes every book with the given title. Letter case does not
  matter for this match.

A number that is not on the menu prints `Invalid choice!`. The menu ends when you
enter `0`, when you enter something that is not a number, or when input runs
out. It then prints `exiting ...`. If the database cannot be opened, an error
beginning with `Fatal :` goes to standard error.

## Using it from Python

```python
from libraryshelf.catalog import Library, AlreadyBorrowedError

with Library("Library.db") as library:
    book = library.add_book("Dune", "Frank Herbert")
    library.borrow_book("Dune")
    try:
        library.borrow_book("Dune")
    except AlreadyBorrowedError:
        print("Dune is already out")
    for book in library.books():
        print(book.id, book.title, book.author, book.available, book.status)
    library.return_book("Dune")
    removed = library.delete_book("dune")
```

`Library(path)` opens or creates the database. It can be used as a context
manager, or closed with `close()`.

- `add_book(title, author)` returns the new `Book`.
- `books()` returns a list of `Book` objects in the order they were added.
  A `Book` has the fields `id`, `title`, `author` and `available`, and a
  `status` property that reads `"Available"` or `"Borrowed"`.
- `borrow_book(title)` raises `AlreadyBorrowedError` if the book is already out.
- `return_book(title)` raises `NotBorrowedError` if the book is on the shelf.
- `delete_book(title)` returns the number of books removed.

`borrow_book`, `return_book` and `delete_book` raise `BookNotFoundError` when no
book has the given title. Database failures raise `LibraryError`, and all of the
exceptions above derive from it.

To drive the menu with your own streams, for example in tests, call
`libraryshelf.cli.run_menu(library, stdin, stdout)`. `libraryshelf.cli.format_book(book)`
returns the text that the listing shows for one book.

## Running the tests

```
pip install ".[test]"
pytest
```