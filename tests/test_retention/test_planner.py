"""Tests for deletion planning."""

from datetime import date

from es_retention.retention.planner import RetentionPlan, plan_deletions
from es_retention.retention.types import Candidate, DatePattern, ExtractedDate

TODAY = date(2025, 6, 15)


def test_plan_selects_only_expired_matching_indices() -> None:
    """Non-matching names are skipped; matching ones are compared to the threshold."""
    names = [
        "zis-audit-2023-05",  # age 25, kept at threshold 25
        "zis-audit-2023-04",  # age 26
        "zis-audit-2020-13",  # invalid month
        "other-2010-01",  # wrong prefix
        "zis-audit-2020.01",  # age 65
        ".kibana_1",
    ]
    plan = plan_deletions(names, "zis-audit-", DatePattern.MONTH, 25, TODAY)

    assert isinstance(plan, RetentionPlan)
    assert plan.listed == 6
    assert plan.matched == ["zis-audit-2023-05", "zis-audit-2023-04", "zis-audit-2020.01"]
    assert [c.index for c in plan.candidates] == ["zis-audit-2020.01", "zis-audit-2023-04"]
    assert plan.candidates[0] == Candidate(
        index="zis-audit-2020.01", date=ExtractedDate(2020, 1), age_months=65
    )


def test_plan_orders_oldest_first_then_by_name() -> None:
    """Candidates are sorted by descending age, ties broken by name."""
    names = ["a-2021-03", "a-2020.01", "a-2020-01", "a-2022-07"]
    plan = plan_deletions(names, "a-", DatePattern.MONTH, 0, TODAY)
    assert [c.index for c in plan.candidates] == [
        "a-2020-01",
        "a-2020.01",
        "a-2021-03",
        "a-2022-07",
    ]


def test_plan_threshold_boundary() -> None:
    """With today 2025-06 an index from 2023-05 is kept at 25 and deleted at 24."""
    names = ["zis-audit-2023-05"]
    assert plan_deletions(names, "zis-audit-", DatePattern.MONTH, 25, TODAY).candidates == []
    assert len(plan_deletions(names, "zis-audit-", DatePattern.MONTH, 24, TODAY).candidates) == 1


def test_plan_week_pattern() -> None:
    """Weekly indices are aged by the month of their week's Monday."""
    prefix = "kafka-zis-external-orders-notify-"
    names = [f"{prefix}2025-1", f"{prefix}2023-10", f"{prefix}2021-53"]
    plan = plan_deletions(names, prefix, DatePattern.WEEK, 21, date(2025, 3, 1))
    assert plan.matched == [f"{prefix}2025-1", f"{prefix}2023-10"]
    # 2023-W10 starts Monday 2023-03-06: 24 months before 2025-03
    assert [(c.index, c.age_months) for c in plan.candidates] == [(f"{prefix}2023-10", 24)]


def test_plan_is_deterministic() -> None:
    """The same listing and date always produce the same plan."""
    names = ["zis-audit-2019-02", "zis-audit-2021-11", "zis-audit-2018.06"]
    first = plan_deletions(names, "zis-audit-", DatePattern.MONTH, 25, TODAY)
    second = plan_deletions(list(names), "zis-audit-", DatePattern.MONTH, 25, TODAY)
    assert first == second


def test_plan_empty_listing() -> None:
    """An empty listing yields an empty plan."""
    plan = plan_deletions([], "zis-audit-", DatePattern.MONTH, 25, TODAY)
    assert plan.listed == 0
    assert plan.matched == []
    assert plan.candidates == []
