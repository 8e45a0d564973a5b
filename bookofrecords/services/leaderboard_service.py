"""
LeaderboardService - Ranks avatars by one statistic and lays out the top 10.

Everything here is a pure function of the record set: no database access.
"""

from typing import Callable, Optional, Sequence

from bookofrecords.models.book import RankEntry
from bookofrecords.models.stats import HallStat, Number, UserRecordSet
from bookofrecords.services.text_layout import pad

LEADERBOARD_SIZE = 10
NAME_WIDTH = 12

ValueFn = Callable[[UserRecordSet, str, HallStat], Optional[Number]]


def stat_value(records: UserRecordSet, name: str, stat: HallStat) -> Optional[Number]:
    """Direct slot lookup. None when the avatar never recorded the stat."""
    return records[name].get(stat)


def rate(
    numerators: Sequence[HallStat],
    denominator: HallStat = HallStat.LIFETIME,
    sign: int = 1
) -> ValueFn:
    """
    Build a derived-metric function: sum(numerators) / denominator.

    Returns None, so rank() leaves the avatar out, when the denominator is
    missing or zero or when none of the numerators was ever recorded.
    A missing numerator next to a recorded one counts as 0.
    """
    def value(records: UserRecordSet, name: str, stat: HallStat) -> Optional[Number]:
        stats = records[name]
        divisor = stats.get(denominator)
        if not divisor:
            return None
        recorded = [stats[numerator] for numerator in numerators if stats.get(numerator) is not None]
        if not recorded:
            return None
        total = sum(recorded)
        return sign * total / divisor

    return value


def rank(
    records: UserRecordSet,
    stat: HallStat,
    value_fn: Optional[ValueFn] = None
) -> list[RankEntry]:
    """
    Rank every avatar descending by value.

    Avatars whose value is None are left out. Ties are ordered by name
    (ascending). The result is not truncated.
    """
    if value_fn is None:
        value_fn = stat_value

    entries = []
    for name in records:
        value = value_fn(records, name, stat)
        if value is None:
            continue
        entries.append(RankEntry(name=name, value=value))

    # Sort by value (descending), then by name
    entries.sort(key=lambda e: (-e.value, e.name))
    return entries


def format_stat(value: Number) -> str:
    """Render a stat the way the display expects (integral floats without decimals)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def leaderboard_line(position: int, name: str, raw: Number, prefix: str, postfix: str) -> str:
    details = "" if prefix == postfix else f" {prefix}{format_stat(raw)}{postfix}"
    return pad(f"{position}. {name[:NAME_WIDTH].ljust(NAME_WIDTH)}{details}")


def render_leaderboard(
    records: UserRecordSet,
    stat: HallStat,
    prefix: str,
    postfix: str,
    value_fn: Optional[ValueFn] = None,
    size: int = LEADERBOARD_SIZE
) -> str:
    """
    Lay out the top ``size`` avatars as 40-column lines.

    Rows past the end of the ranking, or whose raw stat is zero/missing,
    show only the position number. The detail column always shows the raw
    stat, never the derived value, and is omitted when prefix == postfix.
    """
    table = rank(records, stat, value_fn)

    lines = []
    for position in range(1, size + 1):
        entry = table[position - 1] if position <= len(table) else None
        raw = records[entry.name].get(stat) if entry else None
        if raw:
            lines.append(leaderboard_line(position, entry.name, raw, prefix, postfix))
        else:
            lines.append(pad(f"{position}."))

    return "".join(lines)
