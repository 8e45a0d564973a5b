"""
Dependencies de FastAPI para configuración e inyeccion de BD
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookofrecords.core.config import Settings, get_settings
from bookofrecords.database import get_database
from bookofrecords.services.book_service import BookOfRecordsService


def get_book_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> BookOfRecordsService:
    return BookOfRecordsService(db, settings)


# Alias de tipos para que se vea mas limpio en los endpoints
Database = Annotated[AsyncIOMotorDatabase, Depends(get_database)]
BookService = Annotated[BookOfRecordsService, Depends(get_book_service)]
