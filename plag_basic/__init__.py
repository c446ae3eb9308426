"""N-gram based plagiarism checker for plain text submissions."""

__version__ = "0.1.0"
