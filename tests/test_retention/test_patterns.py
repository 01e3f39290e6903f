"""Tests for index name parsing."""

import pytest

from es_retention.retention.patterns import build_index_regex, match_index
from es_retention.retention.types import DatePattern, ExtractedDate


class TestMonthPattern:
    """Test month mode (YYYY-MM / YYYY.MM)."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("zis-audit-2020-01", ExtractedDate(2020, 1)),
            ("zis-audit-2020.01", ExtractedDate(2020, 1)),
            ("zis-audit-2024-12", ExtractedDate(2024, 12)),
            ("zis-audit-1999.07", ExtractedDate(1999, 7)),
        ],
    )
    def test_extracts_year_and_month(self, name: str, expected: ExtractedDate) -> None:
        """Both separators yield exactly (YYYY, MM)."""
        assert match_index(name, "zis-audit-", DatePattern.MONTH) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "zis-audit-2020-13",  # month 13
            "zis-audit-2020-00",  # month 0
            "zis-audit-2020-3",  # one-digit month
            "zis-audit-2020/03",  # wrong separator
            "zis-audit-2020-01-closed",  # trailing characters
            "zis-audit-2020-01 ",
            "zis-audit-20-01",
            "zis-audit-",
        ],
    )
    def test_malformed_bodies_do_not_match(self, name: str) -> None:
        """Malformed dates are skipped, never errors."""
        assert match_index(name, "zis-audit-", DatePattern.MONTH) is None

    @pytest.mark.parametrize(
        "name",
        ["other-2020-01", "xzis-audit-2020-01", "ZIS-AUDIT-2020-01", "zis-audit2020-01"],
    )
    def test_wrong_prefix_does_not_match(self, name: str) -> None:
        """Names not starting with the configured prefix never match."""
        assert match_index(name, "zis-audit-", DatePattern.MONTH) is None

    def test_prefix_is_literal(self) -> None:
        """Regex metacharacters in the prefix are matched literally."""
        assert match_index("logs.v1+2024-01", "logs.v1+", DatePattern.MONTH) == ExtractedDate(
            2024, 1
        )
        assert match_index("logsXv1+2024-01", "logs.v1+", DatePattern.MONTH) is None
        assert match_index("logs.v11+2024-01", "logs.v1+", DatePattern.MONTH) is None

    def test_non_ascii_digits_do_not_match(self) -> None:
        """Only ASCII digits form a date."""
        assert match_index("zis-audit-٢٠٢٠-01", "zis-audit-", "month") is None

    def test_year_zero_does_not_match(self) -> None:
        """Year 0000 is not a calendar year."""
        assert match_index("zis-audit-0000-01", "zis-audit-", DatePattern.MONTH) is None

    def test_week_body_does_not_match_month_mode(self) -> None:
        """A one-digit week body is not a month."""
        assert match_index("zis-audit-2025-1", "zis-audit-", DatePattern.MONTH) is None


class TestWeekPattern:
    """Test week mode (YYYY-W / YYYY-WW)."""

    def test_week_one_2025_belongs_to_december_2024(self) -> None:
        """ISO week 1 of 2025 starts on Monday 2024-12-30."""
        assert match_index("logs-2025-1", "logs-", DatePattern.WEEK) == ExtractedDate(2024, 12)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("logs-2025-5", ExtractedDate(2025, 1)),  # Monday 2025-01-27
            ("logs-2025-10", ExtractedDate(2025, 3)),  # Monday 2025-03-03
            ("logs-2025-01", ExtractedDate(2024, 12)),  # leading zero accepted
            ("logs-2020-53", ExtractedDate(2020, 12)),  # 2020 has 53 ISO weeks
            ("logs-2026-53", ExtractedDate(2026, 12)),
        ],
    )
    def test_month_of_week_monday(self, name: str, expected: ExtractedDate) -> None:
        """The index belongs to the month of the Monday starting its week."""
        assert match_index(name, "logs-", DatePattern.WEEK) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "logs-2021-53",  # 2021 has only 52 ISO weeks
            "logs-2025-0",
            "logs-2025-00",
            "logs-2025-54",
            "logs-2025-100",
            "logs-2025.10",  # week mode only accepts '-'
            "logs-2025-W10",
            "logs-2025-10x",
        ],
    )
    def test_invalid_weeks_are_skipped(self, name: str) -> None:
        """Weeks that do not exist or are malformed are non-matching."""
        assert match_index(name, "logs-", DatePattern.WEEK) is None

    def test_kafka_weekly_index(self) -> None:
        """Weekly kafka index resolves to the month of its Monday."""
        name = "kafka-zis-external-orders-notify-2025-1"
        prefix = "kafka-zis-external-orders-notify-"
        assert match_index(name, prefix, DatePattern.WEEK) == ExtractedDate(2024, 12)


def test_build_index_regex_is_cached() -> None:
    """The compiled expression is reused for the same prefix and pattern."""
    assert build_index_regex("a-", DatePattern.MONTH) is build_index_regex("a-", DatePattern.MONTH)
    assert build_index_regex("a-", DatePattern.WEEK).fullmatch("a-2025-12")


def test_extracted_date_invariants() -> None:
    """ExtractedDate rejects months outside 1..12."""
    with pytest.raises(ValueError):
        ExtractedDate(2025, 13)
    with pytest.raises(ValueError):
        ExtractedDate(2025, 0)
    assert str(ExtractedDate(2025, 3)) == "2025-03"
