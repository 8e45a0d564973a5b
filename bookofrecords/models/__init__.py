from .stats import HallStat, UserStatRecord, UserRecordSet, normalize_stats
from .book import BookOfRecords, RankEntry

__all__ = [
    "HallStat",
    "UserStatRecord",
    "UserRecordSet",
    "normalize_stats",
    "BookOfRecords",
    "RankEntry",
]
