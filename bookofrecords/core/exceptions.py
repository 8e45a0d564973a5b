"""
Excepciones de dominio del Book of Records
"""


class BookOfRecordsError(Exception):
    """Base exception for book of records errors."""
    pass


class InvalidStatRecordError(BookOfRecordsError):
    """Raised when a user document breaks the input contract."""
    pass


class PageLayoutError(BookOfRecordsError):
    """Raised when a page is not made of whole 40-column lines or overflows the screen."""
    pass
