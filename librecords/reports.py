"""Listings, per-course statistics and warning lists built from the student roster."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from .book import LibBook
from .dates import Date, days_between
from .loader import EmptyListError
from .roster import StudentList
from .student import LibStudent

SEPARATOR = "*" * 84
STATS_RULE = "-" * 107
INFO_FILE = "student_info.txt"
BOOKLIST_FILE = "student_booklist.txt"

WARNING_OVERDUE_DAYS = 10
WARNING_OVERDUE_BOOKS = 2
WARNING_FINE_LIMIT = 50.0

NO_WARNED_STUDENT = "No student in warned list\n\n"


@dataclass
class CourseStats:
    """Totals gathered for the students of one course."""

    course: str
    num_students: int = 0
    books_borrowed: int = 0
    total_overdue: int = 0
    total_fine: float = 0.0


def _require_students(roster: StudentList) -> None:
    if roster.is_empty():
        raise EmptyListError("the student list is empty")


def format_student_list(roster: StudentList, with_books: bool) -> str:
    """Render every student, numbered from 1, optionally followed by their books."""
    _require_students(roster)
    parts = []
    for number, student in enumerate(roster, start=1):
        parts.append(f"\nSTUDENT {number}{student.format()}")
        if with_books:
            parts.append("\n\nBOOK LIST:\n")
            parts.extend(
                f"\nBook {index}\n{book.format()}"
                for index, book in enumerate(student.books, start=1)
            )
            parts.append("\n\n")
        else:
            parts.append("\n")
        parts.append(f"{SEPARATOR}\n")
    return "".join(parts)


def display(
    roster: StudentList, to_file: bool, with_books: bool, directory: str | Path = "."
) -> Path | None:
    """Write the student listing to a file in ``directory`` and return its path,
    or print it to standard output and return None."""
    text = format_student_list(roster, with_books)
    if not to_file:
        sys.stdout.write(text)
        return None
    path = Path(directory) / (BOOKLIST_FILE if with_books else INFO_FILE)
    path.write_text(text)
    return path


def compute_statistics(roster: StudentList, today: Date) -> list[CourseStats]:
    """Group the roster by course, in order of each course's first appearance."""
    _require_students(roster)
    stats: dict[str, CourseStats] = {}
    for student in roster:
        entry = stats.setdefault(student.course, CourseStats(course=student.course))
        entry.num_students += 1
        entry.books_borrowed += student.total_books
        entry.total_overdue += sum(
            1 for book in student.books if days_between(book.due, today) > 0
        )
        entry.total_fine += student.total_fine
    return list(stats.values())


def format_statistics(stats: list[CourseStats]) -> str:
    """Render course statistics as a tab-separated table."""
    lines = [
        "",
        "Course\tNumber of Students\tTotal Books Borrowed\t"
        "Total Overdue Books\tTotal Overdue Fine(RM)",
        STATS_RULE,
    ]
    lines.extend(
        f"{entry.course}\t{entry.num_students}\t\t\t{entry.books_borrowed}"
        f"\t\t\t{entry.total_overdue}\t\t\t{entry.total_fine:.2f}"
        for entry in stats
    )
    return "\n".join(lines) + "\n"


def students_with_book(
    roster: StudentList, call_number: str
) -> list[tuple[LibStudent, LibBook]]:
    """Each student holding a book with ``call_number``, with the first such book."""
    _require_students(roster)
    matches = []
    for student in roster:
        book = next((b for b in student.books if b.call_number == call_number), None)
        if book is not None:
            matches.append((student, book))
    return matches


def format_students_with_book(roster: StudentList, call_number: str) -> str:
    """Describe every student who borrowed the book with ``call_number``."""
    matches = students_with_book(roster, call_number)
    count = sum(
        1 for student in roster for book in student.books if book.call_number == call_number
    )
    if count == 0:
        raise LookupError("Book was not found")
    parts = [
        f"\nThere are {count} students that borrow the book with call number "
        f"{call_number} as shown below: \n\n"
    ]
    for student, book in matches:
        parts.append(
            f"Student ID = {student.student_id}\n"
            f"Name = {student.name}\n"
            f"Course = {student.course}\n"
            f"Phone Number = {student.phone_no}\n"
            f"Borrow Date = {book.borrow.format()}\n"
            f"Due Date = {book.due.format()}\n\n\n"
        )
    return "".join(parts)


def _has_name(listing: StudentList, student: LibStudent) -> bool:
    return any(existing.name == student.name for existing in listing)


def warned_students(roster: StudentList, today: Date) -> tuple[StudentList, StudentList]:
    """Build the two warning lists, each kept in name order.

    Type 1 holds students with more than two books overdue by ten days or more;
    type 2 holds students all of whose books are that overdue and whose total
    fine exceeds the limit.
    """
    _require_students(roster)
    type1, type2 = StudentList(), StudentList()
    for student in roster:
        overdue = sum(
            1
            for book in student.books
            if days_between(book.due, today) >= WARNING_OVERDUE_DAYS
        )
        if overdue > WARNING_OVERDUE_BOOKS and not _has_name(type1, student):
            type1.insert_sorted(student)
        if (
            overdue == student.total_books
            and student.total_fine > WARNING_FINE_LIMIT
            and not _has_name(type2, student)
        ):
            type2.insert_sorted(student)
    return type1, type2


def _format_warned_list(listing: StudentList) -> str:
    if listing.is_empty():
        return NO_WARNED_STUDENT
    parts = []
    for number, student in enumerate(listing, start=1):
        parts.append(f"Student {number}{student.format()}\nBook List:\n\n")
        parts.extend(
            f"Book {index}\n{book.format()}\n"
            for index, book in enumerate(student.books, start=1)
        )
        parts.append(f"\n{SEPARATOR}\n")
    return "".join(parts)


def format_warned(type1: StudentList, type2: StudentList, today: Date) -> str:
    """Render both warning lists under a heading giving the reference date."""
    return (
        "\n-----------------------\n"
        "List of Warned Student\n"
        "-----------------------\n"
        f"Today:  {today.format()}\n\n"
        "Type 1 List: Student has more than 2 books that overdue >= 10 days\n\n"
        f"{_format_warned_list(type1)}"
        "\nType 2 List: Student has every books are overdue and total fine > 50\n\n"
        f"{_format_warned_list(type2)}"
    )