"""
BookOfRecordsService - Genera el documento y lo guarda en disco.

Cada ejecución reemplaza el documento anterior completo.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from bookofrecords.core.config import Settings
from bookofrecords.models.book import BookOfRecords
from bookofrecords.repositories.avatar_repository import AvatarRepository
from bookofrecords.services.report_service import build_book

logger = logging.getLogger(__name__)


class BookOfRecordsService:
    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings):
        self.settings = settings
        self.avatars = AvatarRepository(db, settings.users_collection)

    async def generate(self, today: Optional[date] = None) -> BookOfRecords:
        """Calcula el libro a partir del snapshot actual de la base de datos"""
        records = await self.avatars.fetch_user_records()
        book = build_book(records, today)
        logger.info(f"Book of records composed: {len(book.pages)} pages, {len(records)} avatars")
        return book

    def write(self, book: BookOfRecords, path: Optional[str | Path] = None) -> Path:
        """
        Guarda el libro como JSON (indentado a 4 espacios).

        Args:
            book: Documento a guardar
            path: Destino; por defecto settings.book

        Returns:
            Ruta del archivo escrito
        """
        target = Path(path or self.settings.book)
        target.parent.mkdir(parents=True, exist_ok=True)

        # Escribo a un temporal y reemplazo
        tmp = target.with_name(target.name + ".tmp")
        tmp.write_text(book.model_dump_json(indent=4), encoding="utf-8")
        tmp.replace(target)

        logger.info(f"✅ Book of records written to {target}")
        return target

    async def generate_and_write(
        self,
        today: Optional[date] = None,
        path: Optional[str | Path] = None
    ) -> Path:
        book = await self.generate(today)
        return self.write(book, path)
