"""A library member and the books they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from .book import LibBook

MAX_BOOKS = 15


@dataclass
class LibStudent:
    """A student record with contact details, borrowed books and total fine."""

    name: str = " "
    student_id: str = " "
    course: str = " "
    phone_no: str = " "
    total_fine: float = 0.0
    books: list[LibBook] = field(default_factory=list)

    @property
    def total_books(self) -> int:
        return len(self.books)

    def compare_name(self, other: "LibStudent") -> bool:
        """True when this name sorts at or after the other's."""
        return self.name >= other.name

    def same_name(self, other: "LibStudent") -> bool:
        """True when both students have the same name."""
        return self.name == other.name

    def calculate_total_fine(self) -> float:
        """Recompute the total fine from the held books and return it."""
        self.total_fine = sum((book.fine for book in self.books), 0.0)
        return self.total_fine

    def add_book(self, book: LibBook) -> None:
        """Record a newly borrowed book and refresh the total fine."""
        if len(self.books) >= MAX_BOOKS:
            raise ValueError(f"a student may hold at most {MAX_BOOKS} books")
        self.books.append(book)
        self.calculate_total_fine()

    def format(self) -> str:
        """Render the student's details as a multi-line description."""
        return (
            f"\n\nName: {self.name}"
            f"\nId: {self.student_id}"
            f"\nCourse: {self.course}"
            f"\nPhone No: {self.phone_no}"
            f"\nTotal Fine: RM{self.total_fine:.2f}\n"
        )