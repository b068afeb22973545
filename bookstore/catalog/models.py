"""
==============================================================================
Book Models Module
==============================================================================

Pydantic model for catalog records.

Identity:
---------
Two books are the same book when their ISBN and title match. Category and
price are descriptive only and never take part in equality or hashing.

==============================================================================
"""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


UNCLASSIFIED = "Unclassified"


class Book(BaseModel):
    """
    Book record stored in the catalog.

    ISBN and title are fixed once the record is built. Category and price
    may be reassigned; assignments go through the same validation as
    construction.

    Attributes:
        isbn: Book identifier (non-blank)
        title: Book title, the sort and search key (non-blank)
        category: Category name, "Unclassified" when not given
        price: Non-negative price

    Example:
        >>> book = Book(isbn="1", title="book1")
        >>> book.category
        'Unclassified'
        >>> book == Book(isbn="1", title="book1", price=9.5)
        True
    """

    model_config = ConfigDict(
        validate_assignment=True,
    )

    isbn: str = Field(..., min_length=1, frozen=True, description="Book ISBN")
    title: str = Field(..., min_length=1, frozen=True, description="Book title")
    category: str = Field(default=UNCLASSIFIED, description="Book category")
    price: float = Field(default=0.0, ge=0.0, description="Book price")

    @field_validator("isbn", "title")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        """Reject values made only of whitespace."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, value: Any) -> Any:
        """Normalize a missing or blank category to the unclassified sentinel."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return UNCLASSIFIED
        return value

    @property
    def identity(self) -> Tuple[str, str]:
        """The (isbn, title) pair that defines equality."""
        return (self.isbn, self.title)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)
