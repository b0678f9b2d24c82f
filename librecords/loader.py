"""Reading student and book records from text files and basic record lookups."""

from __future__ import annotations

import re
from pathlib import Path

from .book import LibBook
from .dates import Date, days_between
from .roster import StudentList
from .student import LibStudent

FINE_PER_DAY = 0.5
_BOOK_FIELDS = 9
_WORD = re.compile(r"\s*(\S+)")


class EmptyListError(Exception):
    """Raised when an operation needs student records but the list holds none."""


class _Scanner:
    """Reads whitespace-separated words and whole lines from a block of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return not self._text[self._pos:].strip()

    def word(self) -> str:
        match = _WORD.match(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of student data")
        self._pos = match.end()
        return match.group(1)

    def skip(self, count: int) -> None:
        for _ in range(count):
            self.word()

    def rest_of_line(self) -> str:
        # Drop the single separator character after the label, then take the line.
        start = self._pos + 1
        if start > len(self._text):
            raise ValueError("unexpected end of student data")
        end = self._text.find("\n", start)
        if end == -1:
            end = len(self._text)
        self._pos = min(end + 1, len(self._text))
        return self._text[start:end].strip()


def parse_students(text: str) -> list[LibStudent]:
    """Parse student records of the form ``Student Id = ...``, ``Name = ...``,
    ``course = ...`` and ``Phone Number = ...``."""
    scanner = _Scanner(text)
    students = []
    while not scanner.at_end():
        scanner.skip(3)
        student_id = scanner.word()
        scanner.skip(2)
        name = scanner.rest_of_line()
        scanner.skip(2)
        course = scanner.word()
        scanner.skip(3)
        phone_no = scanner.word()
        students.append(
            LibStudent(name=name, student_id=student_id, course=course, phone_no=phone_no)
        )
    return students


def is_redundant_student(roster: StudentList, student: LibStudent) -> bool:
    """True when a student with the same name is already on the roster."""
    return any(existing.same_name(student) for existing in roster)


def read_students(path: str | Path, roster: StudentList) -> int:
    """Add the students in ``path`` to ``roster`` in name order, skipping names
    already present. Return the number of new records added."""
    text = Path(path).read_text()
    added = 0
    for student in parse_students(text):
        if not is_redundant_student(roster, student):
            roster.insert_sorted(student)
            added += 1
    return added


def overdue_fine(due: Date, today: Date) -> float:
    """Fine for a book due on ``due`` as of ``today``: a fixed rate per late day."""
    days = days_between(due, today)
    return days * FINE_PER_DAY if days > 0 else 0.0


def _split_authors(field: str) -> list[str]:
    authors = field.split("/")
    if authors and authors[-1] == "":
        authors.pop()
    return authors


def parse_books(text: str, today: Date) -> list[tuple[str, LibBook]]:
    """Parse book loans, one per nine words: student id, slash-separated authors,
    title, publisher, ISBN, year, call number, borrow date and due date.
    Return (student id, book) pairs with fines computed as of ``today``."""
    words = text.split()
    if len(words) % _BOOK_FIELDS:
        raise ValueError("incomplete book record")
    loans = []
    for start in range(0, len(words), _BOOK_FIELDS):
        (student_id, authors, title, publisher, isbn, year,
         call_number, borrow, due) = words[start:start + _BOOK_FIELDS]
        due_date = Date.parse(due)
        book = LibBook(
            title=title,
            authors=_split_authors(authors),
            publisher=publisher,
            isbn=isbn,
            year_published=int(year),
            borrow=Date.parse(borrow),
            due=due_date,
            call_number=call_number,
            fine=overdue_fine(due_date, today),
        )
        loans.append((student_id, book))
    return loans


def is_redundant_book(roster: StudentList, book: LibBook, student_id: str) -> bool:
    """True when the student with ``student_id`` already holds a book with the
    same call number."""
    return any(
        held.same_call_number(book)
        for student in roster
        if student.student_id == student_id
        for held in student.books
    )


def insert_books(
    path: str | Path, roster: StudentList, today: Date
) -> list[tuple[str, LibBook]]:
    """Attach the loans in ``path`` to their students, skipping books a student
    already holds. Return the loans whose student id is not on the roster."""
    if roster.is_empty():
        raise EmptyListError("the student list is empty")
    text = Path(path).read_text()
    unmatched = []
    for student_id, book in parse_books(text, today):
        if is_redundant_book(roster, book, student_id):
            continue
        student = roster.find_by_id(student_id)
        if student is None:
            unmatched.append((student_id, book))
        else:
            student.add_book(book)
    return unmatched


def delete_record(roster: StudentList, student_id: str) -> bool:
    """Remove the first student with ``student_id``; False if there is none."""
    if roster.is_empty():
        raise EmptyListError("the student list is empty")
    for position, student in enumerate(roster, start=1):
        if student.student_id == student_id:
            roster.remove(position)
            return True
    return False


def search_student(roster: StudentList, student_id: str) -> LibStudent | None:
    """Return the student with ``student_id``, or None if not on the roster."""
    if roster.is_empty():
        raise EmptyListError("the student list is empty")
    return roster.find_by_id(student_id)