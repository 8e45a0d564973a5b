from pydantic import BaseModel, field_validator
from typing import Literal, Union

BOOK_REF = "text-bookofrecords"
PAGE_COUNT = 15


class RankEntry(BaseModel):
    """Posición transitoria en un ranking (nombre y valor ordenado)"""

    name: str
    value: Union[int, float]


class BookOfRecords(BaseModel):
    """Documento persistido: metadata más las páginas de texto en orden"""

    ref: Literal["text-bookofrecords"] = BOOK_REF
    pages: list[str]

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, pages: list[str]) -> list[str]:
        if len(pages) != PAGE_COUNT:
            raise ValueError(f"The book has {PAGE_COUNT} pages, got {len(pages)}")
        for number, page in enumerate(pages, start=1):
            if len(page) % 40 != 0:
                raise ValueError(f"Page {number} is not made of whole 40-column lines")
        return pages
