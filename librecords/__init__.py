"""Library student, book and fine records with statistics and overdue warning lists."""

__version__ = "0.1.0"