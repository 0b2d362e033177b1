import pytest

from libraryshelf.catalog import (
    AlreadyBorrowedError,
    Book,
    BookNotFoundError,
    Library,
    LibraryError,
    NotBorrowedError,
)


@pytest.fixture
def library():
    with Library(":memory:") as lib:
        yield lib


def test_new_library_is_empty(library):
    assert library.books() == []


def test_add_book_is_available(library):
    book = library.add_book("Dune", "Frank Herbert")
    assert book.title == "Dune"
    assert book.author == "Frank Herbert"
    assert book.available is True
    assert library.books() == [book]


def test_books_keep_insertion_order(library):
    library.add_book("B", "x")
    library.add_book("A", "y")
    assert [b.title for b in library.books()] == ["B", "A"]


def test_borrow_marks_unavailable(library):
    library.add_book("Dune", "Frank Herbert")
    library.borrow_book("Dune")
    (book,) = library.books()
    assert book.available is False
    assert book.status == "Borrowed"


def test_borrow_twice_raises(library):
    library.add_book("Dune", "Frank Herbert")
    library.borrow_book("Dune")
    with pytest.raises(AlreadyBorrowedError):
        library.borrow_book("Dune")


def test_borrow_unknown_raises(library):
    with pytest.raises(BookNotFoundError):
        library.borrow_book("Missing")


def test_borrow_title_is_case_sensitive(library):
    library.add_book("Dune", "Frank Herbert")
    with pytest.raises(BookNotFoundError):
        library.borrow_book("dune")


def test_return_round_trip(library):
    library.add_book("Dune", "Frank Herbert")
    library.borrow_book("Dune")
    library.return_book("Dune")
    (book,) = library.books()
    assert book.available is True
    assert book.status == "Available"


def test_return_not_borrowed_raises(library):
    library.add_book("Dune", "Frank Herbert")
    with pytest.raises(NotBorrowedError):
        library.return_book("Dune")


def test_return_unknown_raises(library):
    with pytest.raises(BookNotFoundError):
        library.return_book("Missing")


def test_delete_ignores_case(library):
    library.add_book("Dune", "Frank Herbert")
    library.add_book("Emma", "Jane Austen")
    assert library.delete_book("DUNE") == 1
    assert [b.title for b in library.books()] == ["Emma"]


def test_delete_unknown_raises(library):
    with pytest.raises(BookNotFoundError):
        library.delete_book("Missing")


def test_errors_share_base_class(library):
    library.add_book("Dune", "Frank Herbert")
    with pytest.raises(LibraryError):
        library.return_book("Dune")
    library.borrow_book("Dune")
    with pytest.raises(LibraryError):
        library.borrow_book("Dune")
    with pytest.raises(LibraryError):
        library.delete_book("Missing")


def test_data_persists_in_file(tmp_path):
    path = tmp_path / "Library.db"
    with Library(path) as lib:
        lib.add_book("Dune", "Frank Herbert")
        lib.borrow_book("Dune")
    with Library(path) as lib:
        books = lib.books()
    assert [(b.title, b.author, b.available) for b in books] == [
        ("Dune", "Frank Herbert", False)
    ]


def test_open_directory_fails(tmp_path):
    with pytest.raises(LibraryError):
        Library(tmp_path)


def test_book_status_property():
    assert Book(1, "t", "a", False).status == "Borrowed"