"""
Slots de estadísticas del Hall of Records.

Los números de slot son estables en todo el sistema: nunca reordenar.
"""

import math
from enum import IntEnum
from typing import Any, Mapping, Union

from bookofrecords.core.exceptions import InvalidStatRecordError

Number = Union[int, float]


class HallStat(IntEnum):
    """Índice de cada estadística dentro del objeto stats del avatar"""

    LIFETIME = 1
    MAX_LIFETIME = 2
    DEATHS = 3
    TREASURES = 4
    MAIL_SEND_COUNT = 5
    MAIL_RECV_COUNT = 6
    GRABS = 7
    KILLS = 8
    ESCAPES = 9
    BODY_CHANGES = 10
    MAX_WEALTH = 11
    TRAVEL = 12
    MAX_TRAVEL = 13
    TELEPORTS = 14
    EXPLORED = 15
    ONLINE_TIME = 16
    TALKCOUNT = 17
    WEALTH = 18
    GHOST_COUNT = 19
    ESP_SEND_COUNT = 20
    ESP_RECV_COUNT = 21
    REQUESTS = 22


# UserStatRecord: slot -> valor; UserRecordSet: nombre -> UserStatRecord
UserStatRecord = dict[HallStat, Number]
UserRecordSet = dict[str, UserStatRecord]


def _check_value(slot: HallStat, value: Any) -> Number:
    # bool es subclase de int, pero no es una estadística válida
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidStatRecordError(
            f"Stat {slot.name.lower()} must be numeric, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidStatRecordError(f"Stat {slot.name.lower()} must be finite, got {value}")
    return value


def _slot_for(key: Any) -> HallStat | None:
    if isinstance(key, str):
        if not key.isdigit():
            return None
        key = int(key)
    if isinstance(key, bool) or not isinstance(key, int):
        return None
    try:
        return HallStat(key)
    except ValueError:
        return None


def normalize_stats(raw: Any) -> UserStatRecord:
    """
    Convert a stored ``stats`` object into a UserStatRecord.

    The stats object is either an array indexed by slot number (index 0 unused)
    or a mapping keyed by slot number. Unknown slots are ignored and ``None``
    values count as absent.
    """
    if isinstance(raw, Mapping):
        items = raw.items()
    elif isinstance(raw, (list, tuple)):
        items = enumerate(raw)
    else:
        raise InvalidStatRecordError(f"stats must be an array or object, got {type(raw).__name__}")

    record: UserStatRecord = {}
    for key, value in items:
        slot = _slot_for(key)
        if slot is None or value is None:
            continue
        record[slot] = _check_value(slot, value)
    return record
