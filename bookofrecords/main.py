"""
Entry point de la API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookofrecords.core.config import get_settings
from bookofrecords.core.tracing import configure_logging
from bookofrecords.database import Database

from bookofrecords.controllers.book_controller import router as book_router
from bookofrecords.controllers.health_controller import router as health_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.trace)
    await Database.connect(settings)
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Book of Records API",
    description="Tablas de récords de los avatares de NeoHabitat",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(health_router)
app.include_router(book_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Book of Records API",
        "version": "1.0.0",
        "docs": "/docs"
    }
