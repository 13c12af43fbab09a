import pytest

from book import Book
from exceptions import ValidationError

@pytest.mark.parametrize(
    "title, author, field",
    [
        ("", "X", "Title"),
        ("X", "", "Author"),
        (None, "X", "Title"),
        ("X", None, "Author"),
        (42, "X", "Title"),
    ],
)
def test_invalid_construction(title, author, field):
    with pytest.raises(ValidationError, match=f"{field} cannot be null or empty."):
        Book(title, author)

def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        Book("", "X")

def test_construction_keeps_values_verbatim():
    book = Book("T", "A")
    assert book.title == "T"
    assert book.author == "A"

    padded = Book("  ", " Someone ")
    assert padded.title == "  "
    assert padded.author == " Someone "

def test_fields_are_read_only():
    book = Book("Dune", "Frank Herbert")
    with pytest.raises(AttributeError):
        book.title = "Other"
    with pytest.raises(AttributeError):
        book.author = "Other"

def test_equality_ignores_case():
    assert Book("Dune", "Herbert") == Book("dune", "HERBERT")
    assert Book("Dune", "Herbert") != Book("Dune", "Other")
    assert Book("Dune", "Herbert") != Book("Dune Messiah", "Herbert")

def test_equality_is_symmetric_and_transitive():
    a, b, c = Book("Emma", "Austen"), Book("EMMA", "austen"), Book("emma", "AUSTEN")
    assert a == a
    assert a == b and b == a
    assert b == c and a == c

def test_not_equal_to_other_types():
    book = Book("Emma", "Austen")
    assert book != ("emma", "austen")
    assert book != "Emma by Austen"
    assert book != None  # noqa: E711

def test_equal_books_hash_equal():
    pairs = [
        (Book("Dune", "Herbert"), Book("DUNE", "herbert")),
        (Book("1984", "George Orwell"), Book("1984", "george orwell")),
        (Book("It", "King"), Book("iT", "kInG")),
    ]
    for a, b in pairs:
        assert a == b
        assert hash(a) == hash(b)

def test_equal_books_collapse_in_a_set():
    books = {Book("Dune", "Herbert"), Book("dune", "herbert"), Book("Emma", "Austen")}
    assert len(books) == 2
    assert Book("EMMA", "AUSTEN") in books

def test_catalog_key_is_lower_cased():
    assert Book("The Hobbit", "J.R.R. Tolkien").catalog_key == ("the hobbit", "j.r.r. tolkien")

def test_matches_title_and_author():
    book = Book("Mockingbird", "Lee")
    assert book.matches_title("MOCKINGBIRD")
    assert book.matches_author("lee")
    assert not book.matches_title("Mocking")
    assert not book.matches_title(None)
    assert not book.matches_author("")

def test_dict_conversion():
    book = Book("Ulysses", "James Joyce")
    assert book.to_dict() == {"title": "Ulysses", "author": "James Joyce"}
    assert Book.from_dict(book.to_dict()) == book

def test_from_dict_missing_field():
    with pytest.raises(ValidationError, match="Author"):
        Book.from_dict({"title": "Ulysses"})

def test_repr():
    assert repr(Book("Emma", "Austen")) == "Book(title='Emma', author='Austen')"

def test_str():
    assert str(Book("Emma", "Austen")) == "Emma by Austen"
