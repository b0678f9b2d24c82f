[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "librecords"
version = "0.1.0"
description = "Library student records, borrowed books, overdue fines, course statistics and warning lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "students", "books", "fines", "overdue", "records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["librecords*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
