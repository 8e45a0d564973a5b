"""
ReportService - Composes the 15 pages of The Book of Records.

Page 1 is the table of contents; pages 2-15 come from CATEGORIES, in order.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bookofrecords.models.book import BookOfRecords
from bookofrecords.models.stats import HallStat, UserRecordSet
from bookofrecords.services.leaderboard_service import ValueFn, rate, render_leaderboard
from bookofrecords.services.text_layout import BLANK_LINE, pad, pad_page

BOOK_TITLE = "The Book of Records"


class Category(BaseModel):
    """Una página del libro: encabezado centrado y el top 10 de una estadística"""

    title: str
    header: tuple[str, ...]
    stat: HallStat
    prefix: str = ""
    postfix: str = ""
    value_fn: Optional[ValueFn] = None
    filler: bool = True  # línea en blanco entre encabezado y ranking

    model_config = ConfigDict(frozen=True)

    def render(self, records: UserRecordSet) -> str:
        page = "".join(pad(line, True) for line in self.header)
        if self.filler:
            page += BLANK_LINE
        page += render_leaderboard(records, self.stat, self.prefix, self.postfix, self.value_fn)
        return page


CATEGORIES: tuple[Category, ...] = (
    Category(
        title="WEALTHIEST",
        header=("WEALTHIEST: The 10 Avatars with the", "largest bank accounts today."),
        stat=HallStat.WEALTH, prefix="($", postfix=")",
    ),
    Category(
        title="ALL-TIME WEALTHIEST",
        header=("ALL-TIME WEALTHIEST: The 10 largest", "bank balances ever achieved."),
        stat=HallStat.MAX_WEALTH, prefix="($", postfix=")",
    ),
    Category(
        title="LONGEST LIVED",
        header=("LONGEST LIVED: The 10 oldest Avatars", "today."),
        stat=HallStat.LIFETIME, postfix=" days",
    ),
    Category(
        title="ALL-TIME LONGEST LIVED",
        header=("ALL-TIME LONGEST LIVED: The 10 oldest", "Avatars that ever were."),
        stat=HallStat.MAX_LIFETIME, postfix=" days",
    ),
    Category(
        title="MOST TIMES KILLED",
        header=("MOST TIMES KILLED: The 10 most killed", "Avatars."),
        stat=HallStat.DEATHS, postfix=" deaths",
    ),
    # Three header lines, no blank filler line
    Category(
        title="MOST DANGEROUS",
        header=(
            "MOST DANGEROUS: The 10 Avatars who have",
            "killed the largest number of their",
            "fellow Avatars.",
        ),
        stat=HallStat.KILLS, postfix=" kills",
        filler=False,
    ),
    Category(
        title="MOST OUTSPOKEN",
        header=("MOST OUTSPOKEN: The 10 most talkative", "Avatars."),
        stat=HallStat.TALKCOUNT, postfix=" balloons",
    ),
    Category(
        title="BIGGEST CHAMELEON",
        header=("BIGGEST CHAMELEON: The 10 Avatars who", "change their appearance most often."),
        stat=HallStat.BODY_CHANGES,
        value_fn=rate([HallStat.BODY_CHANGES]),
    ),
    Category(
        title="MOST TELEPATHIC",
        header=("MOST TELEPATHIC: The 10 Avatars with the", "greatest usage of ESP."),
        stat=HallStat.ESP_SEND_COUNT,
        value_fn=rate([HallStat.ESP_SEND_COUNT, HallStat.ESP_RECV_COUNT]),
    ),
    Category(
        title="MOST ACTIVE",
        header=("MOST ACTIVE: The 10 most active", "Avatars."),
        stat=HallStat.TRAVEL,
        value_fn=rate([HallStat.TRAVEL]),
    ),
    Category(
        title="MOST SEDATE",
        header=("MOST SEDATE: The 10 least active", "Avatars."),
        stat=HallStat.TRAVEL,
        value_fn=rate([HallStat.TRAVEL], sign=-1),
    ),
    Category(
        title="MOST TRAVELLED",
        header=("MOST TRAVELLED: The 10 Avatars alive", "today who have moved around the most."),
        stat=HallStat.TRAVEL, postfix=" regions",
    ),
    Category(
        title="ALL-TIME MOST TRAVELLED",
        header=("ALL-TIME MOST TRAVELLED: The 10", "Avatars that traveled the world."),
        stat=HallStat.MAX_TRAVEL, postfix=" regions",
    ),
    Category(
        title="MOST ACTIVE TELEPORTER",
        header=("MOST ACTIVE TELEPORTER: The 10 Avatars", "alive today who have TelePorted most."),
        stat=HallStat.TELEPORTS, postfix=" ports",
    ),
)


def page_titles() -> list[str]:
    """Titles of all pages, contents included, in page order."""
    return ["Contents"] + [category.title for category in CATEGORIES]


def format_book_date(today: date) -> str:
    """'Mon Oct 19 2026': the first 15 characters of a human-readable date."""
    return today.strftime("%a %b %d %Y")[:15]


def contents_page(today: date) -> str:
    page = pad(f"{BOOK_TITLE} - {format_book_date(today)}", True)
    for number, category in enumerate(CATEGORIES, start=2):
        page += pad(f"{number}. {category.title}", True)
    return pad_page(page)


def compose_report(records: UserRecordSet, today: Optional[date] = None) -> list[str]:
    """
    Build the 15 pages of the book, each padded to a full 40x15 screen.

    Given the same records and date the output is byte-identical.
    """
    if today is None:
        today = date.today()

    pages = [contents_page(today)]
    for category in CATEGORIES:
        pages.append(pad_page(category.render(records)))
    return pages


def build_book(records: UserRecordSet, today: Optional[date] = None) -> BookOfRecords:
    return BookOfRecords(pages=compose_report(records, today))
