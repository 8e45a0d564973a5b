"""
Unit tests for ranking and leaderboard layout
"""

import pytest

from bookofrecords.models.stats import HallStat
from bookofrecords.services.leaderboard_service import (
    format_stat,
    rank,
    rate,
    render_leaderboard,
)
from bookofrecords.services.text_layout import pad, page_lines


class TestRank:
    """Test suite for rank()."""

    def test_sorted_descending(self, sample_records):
        table = rank(sample_records, HallStat.WEALTH)

        assert [(e.name, e.value) for e in table] == [("Max", 1200), ("Zippy", 500)]

    def test_missing_values_are_excluded(self, sample_records):
        table = rank(sample_records, HallStat.KILLS)

        assert [e.name for e in table] == ["Max"]

    def test_ties_ordered_by_name(self):
        records = {
            "Charlie": {HallStat.DEATHS: 2},
            "alpha": {HallStat.DEATHS: 7},
            "Bravo": {HallStat.DEATHS: 2},
            "Able": {HallStat.DEATHS: 2},
        }

        table = rank(records, HallStat.DEATHS)

        assert [e.name for e in table] == ["alpha", "Able", "Bravo", "Charlie"]

    def test_not_truncated(self):
        records = {f"user{i:02d}": {HallStat.TALKCOUNT: i} for i in range(1, 26)}

        table = rank(records, HallStat.TALKCOUNT)

        assert len(table) == 25
        values = [e.value for e in table]
        assert values == sorted(values, reverse=True)

    def test_empty_record_set(self):
        assert rank({}, HallStat.WEALTH) == []

    def test_custom_value_function(self, sample_records):
        table = rank(sample_records, HallStat.WEALTH, lambda records, name, stat: len(name))

        assert [e.name for e in table] == ["Newborn", "Zippy", "Max"]


class TestRate:
    """Test suite for derived metrics."""

    def test_ratio(self, sample_records):
        value = rate([HallStat.BODY_CHANGES])

        assert value(sample_records, "Zippy", HallStat.BODY_CHANGES) == 0.5

    def test_zero_denominator_is_left_out(self, sample_records):
        value = rate([HallStat.BODY_CHANGES])

        assert value(sample_records, "Newborn", HallStat.BODY_CHANGES) is None

    def test_missing_denominator_is_left_out(self):
        value = rate([HallStat.TRAVEL])

        assert value({"Drifter": {HallStat.TRAVEL: 9}}, "Drifter", HallStat.TRAVEL) is None

    def test_no_recorded_numerator_is_left_out(self):
        value = rate([HallStat.ESP_SEND_COUNT, HallStat.ESP_RECV_COUNT])

        assert value({"Quiet": {HallStat.LIFETIME: 8}}, "Quiet", HallStat.ESP_SEND_COUNT) is None

    def test_missing_numerator_next_to_recorded_one_counts_as_zero(self):
        records = {"Psychic": {HallStat.ESP_SEND_COUNT: 6, HallStat.LIFETIME: 3}}
        value = rate([HallStat.ESP_SEND_COUNT, HallStat.ESP_RECV_COUNT])

        assert value(records, "Psychic", HallStat.ESP_SEND_COUNT) == 2

    def test_negative_sign_ranks_least_active_first(self):
        records = {
            "Fast": {HallStat.TRAVEL: 20, HallStat.LIFETIME: 10},
            "Slow": {HallStat.TRAVEL: 2, HallStat.LIFETIME: 10},
        }

        table = rank(records, HallStat.TRAVEL, rate([HallStat.TRAVEL], sign=-1))

        assert [e.name for e in table] == ["Slow", "Fast"]

    def test_zero_lifetime_does_not_break_ranking(self, sample_records):
        table = rank(sample_records, HallStat.BODY_CHANGES, rate([HallStat.BODY_CHANGES]))

        # Max never changed bodies, Newborn has lifetime 0
        assert [(e.name, e.value) for e in table] == [("Zippy", 0.5)]

    def test_zero_lifetime_never_ranks_first_when_negated(self):
        records = {
            "Newborn": {HallStat.TRAVEL: 90, HallStat.LIFETIME: 0},
            "Sloth": {HallStat.TRAVEL: 1, HallStat.LIFETIME: 50},
            "Runner": {HallStat.TRAVEL: 50, HallStat.LIFETIME: 5},
        }

        table = rank(records, HallStat.TRAVEL, rate([HallStat.TRAVEL], sign=-1))

        assert [e.name for e in table] == ["Sloth", "Runner"]

    @pytest.mark.parametrize("sign", [1, -1])
    def test_derived_rank_length_counts_avatars_with_the_stat(self, sign):
        records = {f"idle{i}": {HallStat.LIFETIME: 10} for i in range(10)}
        records["Sloth"] = {HallStat.TRAVEL: 1, HallStat.LIFETIME: 50}

        table = rank(records, HallStat.TRAVEL, rate([HallStat.TRAVEL], sign=sign))

        assert [e.name for e in table] == ["Sloth"]

        block = render_leaderboard(records, HallStat.TRAVEL, "", "", rate([HallStat.TRAVEL], sign=sign))
        assert block[:40] == pad("1. Sloth")


class TestRenderLeaderboard:
    """Test suite for the 10-row text block."""

    def test_example_rows(self, sample_records):
        block = render_leaderboard(sample_records, HallStat.WEALTH, "($", ")")
        lines = page_lines(block)

        assert lines[0] == pad("1. Max          ($1200)")
        assert lines[1] == pad("2. Zippy        ($500)")
        assert lines[2:] == [pad(f"{i}.") for i in range(3, 11)]

    @pytest.mark.parametrize("count", [0, 1, 10, 23])
    def test_always_400_characters(self, count):
        records = {f"avatar{i}": {HallStat.KILLS: i + 1} for i in range(count)}

        block = render_leaderboard(records, HallStat.KILLS, "", " kills")

        assert len(block) == 400

    def test_empty_records_render_placeholders(self):
        block = render_leaderboard({}, HallStat.WEALTH, "($", ")")

        assert page_lines(block) == [pad(f"{i}.") for i in range(1, 11)]

    def test_zero_stat_renders_placeholder(self):
        records = {"Broke": {HallStat.WEALTH: 0}}

        block = render_leaderboard(records, HallStat.WEALTH, "($", ")")

        assert block[:40] == pad("1.")

    def test_name_cut_to_twelve_characters(self):
        records = {"Supercalifragilistic": {HallStat.DEATHS: 4}}

        block = render_leaderboard(records, HallStat.DEATHS, "", " deaths")

        assert block[:40] == pad("1. Supercalifra 4 deaths")

    def test_equal_prefix_postfix_omits_detail(self, sample_records):
        block = render_leaderboard(
            sample_records, HallStat.BODY_CHANGES, "", "", rate([HallStat.BODY_CHANGES])
        )
        lines = page_lines(block)

        assert lines[0] == pad("1. Zippy")
        # Newborn (lifetime 0) and Max (no body changes) are not ranked
        assert lines[1:] == [pad(f"{i}.") for i in range(2, 11)]

    def test_detail_shows_raw_stat(self):
        records = {"Tourist": {HallStat.TRAVEL: 42.0, HallStat.LIFETIME: 4}}

        block = render_leaderboard(records, HallStat.TRAVEL, "", " regions")

        assert block[:40] == pad("1. Tourist      42 regions")


class TestFormatStat:

    def test_integral_float(self):
        assert format_stat(12.0) == "12"

    def test_fraction(self):
        assert format_stat(2.5) == "2.5"

    def test_int(self):
        assert format_stat(7) == "7"
