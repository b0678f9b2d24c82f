"""A book on loan from the library."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dates import Date

MAX_AUTHORS = 10


@dataclass
class LibBook:
    """One borrowed book with its loan dates and accrued fine."""

    title: str = " "
    authors: list[str] = field(default_factory=list)
    publisher: str = " "
    isbn: str = " "
    year_published: int = 0
    borrow: Date = field(default_factory=Date)
    due: Date = field(default_factory=Date)
    call_number: str = " "
    fine: float = 0.0

    def __post_init__(self) -> None:
        if len(self.authors) > MAX_AUTHORS:
            raise ValueError(f"a book may list at most {MAX_AUTHORS} authors")

    def compare_title(self, other: "LibBook") -> bool:
        """True when this title sorts at or after the other's."""
        return self.title >= other.title

    def same_call_number(self, other: "LibBook") -> bool:
        """True when both books carry the same call number."""
        return self.call_number == other.call_number

    def format(self) -> str:
        """Render the book as a multi-line description."""
        authors = "".join(f"{author}\t" for author in self.authors)
        return (
            f"\nTitle: {self.title}"
            f"\nAuthor: {authors}"
            f"\nPublisher: {self.publisher}"
            f"\nYear Published: {self.year_published}"
            f"\nISBN: {self.isbn}"
            f"\nCall Number: {self.call_number}"
            f"\nBorrow Date: {self.borrow.format()}"
            f"\nDue Date: {self.due.format()}"
            f"\nFine: RM{self.fine:.2f}\n"
        )