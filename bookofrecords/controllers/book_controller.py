"""
Controlador del Book of Records - Endpoints de consulta

El libro se calcula a partir del snapshot actual de la base de datos.
"""

from fastapi import APIRouter, HTTPException, Path, status
from pydantic import BaseModel

from bookofrecords.core.dependencies import BookService
from bookofrecords.core.exceptions import BookOfRecordsError
from bookofrecords.models.book import BookOfRecords, PAGE_COUNT
from bookofrecords.services.report_service import page_titles
from bookofrecords.services.text_layout import page_lines


router = APIRouter(prefix="/book-of-records", tags=["book-of-records"])


class PageResponse(BaseModel):
    """Una página del libro separada en líneas de 40 columnas."""
    number: int
    title: str
    lines: list[str]


async def _generate(service) -> BookOfRecords:
    try:
        return await service.generate()
    except BookOfRecordsError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )


@router.get("", response_model=BookOfRecords)
async def get_book_of_records(service: BookService):
    """
    Obtener el documento completo (ref y las 15 páginas).
    """
    return await _generate(service)


@router.get("/pages/{number}", response_model=PageResponse)
async def get_book_page(
    service: BookService,
    number: int = Path(..., description="Número de página (1 = índice)")
):
    """
    Obtener una página del libro.
    """
    if not 1 <= number <= PAGE_COUNT:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page {number} not found"
        )

    book = await _generate(service)

    return PageResponse(
        number=number,
        title=page_titles()[number - 1],
        lines=page_lines(book.pages[number - 1])
    )
