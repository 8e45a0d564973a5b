"""
Batch job: genera The Book of Records desde la base de datos.

Pensado para correr periódicamente (al menos una vez por día).

    python -m bookofrecords.cli --mongo neohabitatmongo:27017/elko --book out.json
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pymongo.errors import PyMongoError

from bookofrecords.core.config import DEFAULTS_FILE, Settings, load_settings
from bookofrecords.core.exceptions import BookOfRecordsError
from bookofrecords.core.tracing import configure_logging
from bookofrecords.database import Database
from bookofrecords.services.book_service import BookOfRecordsService

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate The Book of Records from the database")
    parser.add_argument(
        "-t", "--trace",
        default=None,
        help="Trace level name (error, warn, info, verbose, debug, silly)",
    )
    parser.add_argument(
        "-m", "--mongo",
        default=None,
        help="Mongodb server (host:port/database)",
    )
    parser.add_argument(
        "-b", "--book",
        default=None,
        help="JSON output file for The Book of Records",
    )
    parser.add_argument(
        "--defaults",
        type=Path,
        default=Path(DEFAULTS_FILE),
        help=f"JSON defaults file (default: {DEFAULTS_FILE})",
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(
        args.defaults,
        overrides={"trace": args.trace, "mongo": args.mongo, "book": args.book},
    )


async def generate_book_of_records(settings: Settings) -> Path:
    await Database.connect(settings)
    try:
        service = BookOfRecordsService(Database.get_db(), settings)
        return await service.generate_and_write()
    finally:
        await Database.disconnect()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = settings_from_args(args)
    configure_logging(settings.trace)

    try:
        asyncio.run(generate_book_of_records(settings))
    except PyMongoError as e:
        logger.error(f"❌ Database error: {e}")
        return 1
    except BookOfRecordsError as e:
        logger.error(f"❌ Invalid avatar data: {e}")
        return 1
    except OSError as e:
        logger.error(f"❌ Could not write the book: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
