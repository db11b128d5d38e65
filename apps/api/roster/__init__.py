"""Class roster backend: users plus named classes of students."""

__version__ = "0.1.0"
