from __future__ import annotations

from typing import Any

from exceptions import ValidationError


def _same_text(value: str, query: str | None) -> bool:
    if not isinstance(query, str):
        return False
    return value.lower() == query.lower()


class Book:
    """Represents a single book in the catalog.

    Books are compared by title and author, ignoring case, so
    ``Book("Dune", "Herbert") == Book("dune", "HERBERT")``.
    """

    __slots__ = ("_title", "_author")

    def __init__(self, title: str, author: str) -> None:
        if not isinstance(title, str) or not title:
            raise ValidationError("Title cannot be null or empty.")
        if not isinstance(author, str) or not author:
            raise ValidationError("Author cannot be null or empty.")
        self._title = title
        self._author = author

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def catalog_key(self) -> tuple[str, str]:
        """Lower-cased (title, author) pair used for equality and hashing."""
        return (self._title.lower(), self._author.lower())

    def matches_title(self, title: str | None) -> bool:
        return _same_text(self._title, title)

    def matches_author(self, author: str | None) -> bool:
        return _same_text(self._author, author)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Book):
            return NotImplemented
        return self.catalog_key == other.catalog_key

    def __hash__(self) -> int:
        return hash(self.catalog_key)

    def __str__(self) -> str:
        return f"{self._title} by {self._author}"

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, author={self._author!r})"

    def to_dict(self) -> dict[str, str]:
        return {"title": self._title, "author": self._author}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Book:
        return Book(title=data.get("title"), author=data.get("author"))
