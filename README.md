# librecords

A small library for keeping track of library students, the books they have
borrowed, the fines they owe and which of them should be warned about overdue
books.

## Installing

```
pip install .
```

## Modules

- `librecords.dates`: `Date` (day, month and year, printed as `day/month/year`,
  read with `Date.parse`), plus `total_days` and `days_between`. Every fourth
  year counts as a leap year.
- `librecords.book`: `LibBook`, one borrowed book with up to 10 authors, its
  borrow and due dates, call number and fine.
- `librecords.student`: `LibStudent`, a student with contact details, up to 15
  books (`add_book`) and a total fine (`calculate_total_fine`).
- `librecords.roster`: `StudentList`, students addressed by 1-based position
  (`get`, `set`, `insert_at`, `remove`), with `insert_sorted` to keep them in
  name order and `find_by_id`. Out-of-range positions raise `IndexError`.
- `librecords.loader`: reading input files and record lookups:
  - `read_students(path, roster)` adds students in name order, skips any whose
    name is already listed, and returns how many were added.
  - `insert_books(path, roster, today)` attaches each book to its student,
    skips a book the student already holds (same call number), and returns the
    `(student id, book)` pairs whose student is not on the roster.
  - `overdue_fine(due, today)` charges RM0.50 for each day past the due date.
  - `delete_record` and `search_student` work by student id.
  - Operations that need students raise `EmptyListError` on an empty roster.
- `librecords.reports`: output built from the roster:
  - `format_student_list` and `display`. `display` prints to standard output,
    or writes `student_info.txt` (without books) or `student_booklist.txt`
    (with books) in a given directory.
  - `compute_statistics` and `format_statistics` give per-course counts of
    students, borrowed books and overdue books, with the total fine.
  - `students_with_book` and `format_students_with_book` list the holders of
    a call number. The latter raises `LookupError` when nobody holds it.
  - `warned_students` and `format_warned` build two lists. Type 1 is students
    with more than two books overdue by 10 days or more. Type 2 is students
    whose books are all that overdue and whose total fine is over RM50.

## Input files

A student file holds one block per student:

```
Student Id = 1200192
Name = Tan Ah Kow
course = CS
Phone Number = x1234
```

A book file holds nine whitespace-separated fields per book: student id,
authors separated by `/`, title, publisher, ISBN, year published, call number,
borrow date and due date. No field may contain spaces.

```
1200192 Ali_Ahmad/Siti_Aminah Data_Structures Pearson 0000000000 2010 QA76.73 10/2/2020 24/2/2020
```

## Example

```python
from librecords.dates import Date
from librecords.loader import insert_books, read_students
from librecords.reports import compute_statistics, format_statistics
from librecords.roster import StudentList

today = Date(29, 3, 2020)
roster = StudentList()
read_students("student.txt", roster)
insert_books("book.txt", roster, today)
print(format_statistics(compute_statistics(roster, today)))
```

## What it does not do

There is no interactive menu and no command-line program. The package is a
library only. Records live in memory in a `StudentList` and are not saved
anywhere, except for the listing files that `display` writes.