import pytest

from librecords.book import LibBook
from librecords.dates import Date
from librecords.loader import EmptyListError
from librecords.reports import (
    BOOKLIST_FILE,
    INFO_FILE,
    NO_WARNED_STUDENT,
    SEPARATOR,
    CourseStats,
    compute_statistics,
    display,
    format_statistics,
    format_student_list,
    format_students_with_book,
    format_warned,
    students_with_book,
    warned_students,
)
from librecords.roster import StudentList
from librecords.student import LibStudent

TODAY = Date(29, 3, 2020)


def _book(call_number, due, fine=0.0):
    return LibBook(
        title=f"Title_{call_number}",
        authors=["Writer"],
        call_number=call_number,
        borrow=Date(1, 1, 2020),
        due=due,
        fine=fine,
    )


def _student(name, student_id, course, books=()):
    student = LibStudent(name=name, student_id=student_id, course=course, phone_no="555")
    for book in books:
        student.add_book(book)
    return student


@pytest.fixture
def roster():
    result = StudentList()
    result.insert_sorted(
        _student("Alice", "1001", "CS", [_book("A1", Date(1, 3, 2020), 14.0), _book("A2", Date(1, 5, 2020))])
    )
    result.insert_sorted(_student("Bob", "1002", "IT", [_book("A1", Date(1, 1, 2020), 44.0)]))
    result.insert_sorted(_student("Carol", "1003", "CS"))
    return result


def test_student_list_numbers_students_in_order(roster):
    text = format_student_list(roster, with_books=False)
    assert text.index("STUDENT 1") < text.index("Name: Alice")
    assert text.index("STUDENT 2") < text.index("Name: Bob")
    assert text.count(SEPARATOR) == len(roster)
    assert "BOOK LIST:" not in text


def test_student_list_with_books_lists_each_book(roster):
    text = format_student_list(roster, with_books=True)
    assert text.count("BOOK LIST:") == len(roster)
    assert text.count("Call Number: A1") == 2
    assert "Title: Title_A2" in text


def test_student_list_requires_students():
    with pytest.raises(EmptyListError):
        format_student_list(StudentList(), with_books=True)


def test_display_to_file_writes_listing(roster, tmp_path):
    path = display(roster, to_file=True, with_books=False, directory=tmp_path)
    assert path == tmp_path / INFO_FILE
    assert path.read_text() == format_student_list(roster, with_books=False)

    path = display(roster, to_file=True, with_books=True, directory=tmp_path)
    assert path == tmp_path / BOOKLIST_FILE
    assert path.read_text() == format_student_list(roster, with_books=True)


def test_display_to_screen_prints(roster, capsys):
    assert display(roster, to_file=False, with_books=True, directory=".") is None
    assert capsys.readouterr().out == format_student_list(roster, with_books=True)


def test_statistics_group_by_course(roster):
    stats = compute_statistics(roster, TODAY)
    assert [entry.course for entry in stats] == ["CS", "IT"]
    assert sum(entry.num_students for entry in stats) == len(roster)
    assert sum(entry.books_borrowed for entry in stats) == sum(s.total_books for s in roster)
    assert sum(entry.total_fine for entry in stats) == pytest.approx(
        sum(s.total_fine for s in roster)
    )
    cs = stats[0]
    assert cs.total_overdue == 1


def test_statistics_require_students():
    with pytest.raises(EmptyListError):
        compute_statistics(StudentList(), TODAY)


def test_format_statistics_table():
    text = format_statistics([CourseStats("CS", 2, 3, 1, 7.5)])
    assert "Course\tNumber of Students\tTotal Books Borrowed" in text
    assert "CS\t2\t\t\t3\t\t\t1\t\t\t7.50" in text


def test_students_with_book(roster):
    matches = students_with_book(roster, "A1")
    assert [student.name for student, _ in matches] == ["Alice", "Bob"]
    assert all(book.call_number == "A1" for _, book in matches)
    assert students_with_book(roster, "ZZ") == []


def test_format_students_with_book(roster):
    text = format_students_with_book(roster, "A1")
    count = len(students_with_book(roster, "A1"))
    assert f"There are {count} students that borrow the book with call number A1" in text
    assert "Student ID = 1002" in text
    assert "Student ID = 1003" not in text


def test_format_students_with_book_not_found(roster):
    with pytest.raises(LookupError):
        format_students_with_book(roster, "ZZ")


def test_warned_students(roster):
    dave = _student("Dave", "1004", "IT", [_book(f"D{i}", Date(1, 1, 2020), 20.0) for i in range(3)])
    roster.insert_sorted(dave)
    roster.insert_at(1, _student("Dave", "1005", "IT", [_book(f"E{i}", Date(1, 1, 2020), 20.0) for i in range(3)]))
    type1, type2 = warned_students(roster, TODAY)
    assert [s.name for s in type1] == ["Dave"]
    assert [s.name for s in type2] == ["Dave"]


def test_warned_students_require_students():
    with pytest.raises(EmptyListError):
        warned_students(StudentList(), TODAY)


def test_format_warned_empty_lists():
    text = format_warned(StudentList(), StudentList(), TODAY)
    assert f"Today:  {TODAY.format()}" in text
    assert text.count(NO_WARNED_STUDENT) == 2


def test_format_warned_lists_students(roster):
    listing = StudentList()
    listing.insert_sorted(roster.get(1))
    text = format_warned(listing, StudentList(), TODAY)
    assert "Student 1" in text
    assert "Name: Alice" in text
    assert text.count(NO_WARNED_STUDENT) == 1