import logging
import threading
from typing import Dict, Iterator, List, Optional

from book import Book
from exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class Library:
    """Manages an ordered, in-memory collection of books.

    Insertion order is preserved and equal books may be stored more than
    once. Membership is decided by ``Book`` equality, never identity.

    Every operation holds an internal lock, so one instance may be shared
    by the API's worker threads.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._lock = threading.RLock()

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a book to the end of the catalog. Duplicates are allowed."""
        if not isinstance(book, Book):
            raise ValidationError("Book cannot be null.")
        with self._lock:
            self._books.append(book)
            size = len(self._books)
        logger.debug("Added %r (catalog size %d)", book, size)

    def remove_book(self, book: Book) -> None:
        """Remove the first entry equal to ``book``.

        Raises NotFoundError and leaves the catalog untouched when no entry
        matches. Call repeatedly to drop every duplicate.
        """
        with self._lock:
            for index, stored in enumerate(self._books):
                if stored == book:
                    del self._books[index]
                    size = len(self._books)
                    break
            else:
                raise NotFoundError("Book not found in the library.")
        logger.debug("Removed %r (catalog size %d)", book, size)

    def search_by_title(self, title: Optional[str]) -> List[Book]:
        with self._lock:
            return [book for book in self._books if book.matches_title(title)]

    def search_by_author(self, author: Optional[str]) -> List[Book]:
        with self._lock:
            return [book for book in self._books if book.matches_author(author)]

    def get_all_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    # ------------------------- Read helpers ------------------------- #
    def get_statistics(self) -> Dict[str, int]:
        """Total entries and distinct authors (case-insensitive)."""
        with self._lock:
            authors = {book.author.lower() for book in self._books}
            return {"total_books": len(self._books), "unique_authors": len(authors)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def __contains__(self, book: object) -> bool:
        with self._lock:
            return book in self._books

    def __iter__(self) -> Iterator[Book]:
        # Iterate over a snapshot so callers may mutate the catalog meanwhile.
        return iter(self.get_all_books())
