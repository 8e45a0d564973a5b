"""
Controlador de salud - Estado de la API, de Mongo y del último libro escrito
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from bookofrecords.core.config import get_settings
from bookofrecords.database import Database


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    database: str
    book_written: Optional[bool] = None


async def _database_status() -> str:
    if Database.client is None:
        return "disconnected"
    try:
        await Database.client.admin.command("ping")
    except PyMongoError:
        return "unreachable"
    return "connected"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    La API responde "degraded" si Mongo no contesta al ping.
    """
    db_status = await _database_status()

    return HealthResponse(
        status="ok" if db_status == "connected" else "degraded",
        database=db_status,
        book_written=Path(get_settings().book).is_file()
    )
