"""
AvatarRepository - Lectura de las estadísticas de avatares desde la colección odb.

Solo lectura: el Book of Records nunca escribe en la base de datos.
"""

import logging
from typing import Any, Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase

from bookofrecords.core.exceptions import InvalidStatRecordError
from bookofrecords.models.stats import UserRecordSet, normalize_stats

logger = logging.getLogger(__name__)

# Los documentos de usuario tienen ref "user-<nombre>"
USER_REF_PATTERN = "^user-"


def collect_user_records(users: Iterable[dict[str, Any]]) -> UserRecordSet:
    """
    Build the UserRecordSet from user documents.

    Users without mods, or whose first mod (the avatar) has no stats,
    are skipped. A repeated name keeps the last document seen.
    """
    records: UserRecordSet = {}
    skipped = 0

    for user in users:
        name = user.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidStatRecordError(f"User document {user.get('ref', '?')} has no name")

        mods = user.get("mods") or []
        if not mods:
            skipped += 1
            continue

        stats = mods[0].get("stats")
        if stats is None:
            skipped += 1
            continue

        records[name] = normalize_stats(stats)

    logger.info(f"Collected stats for {len(records)} avatars ({skipped} skipped)")
    return records


class AvatarRepository:
    def __init__(self, db: AsyncIOMotorDatabase, collection: str = "odb"):
        self.db = db
        self.collection = db[collection]

    async def list_users(self) -> list[dict[str, Any]]:
        """Todos los documentos de usuario (solo name y mods)"""
        cursor = self.collection.find(
            {"ref": {"$regex": USER_REF_PATTERN}},
            {"_id": 0, "ref": 1, "name": 1, "mods": 1}
        )
        return await cursor.to_list(length=None)

    async def fetch_user_records(self) -> UserRecordSet:
        """Snapshot actual de estadísticas, una entrada por avatar"""
        users = await self.list_users()
        logger.debug(f"Fetched {len(users)} user documents")
        return collect_user_records(users)
