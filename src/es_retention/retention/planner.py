"""Turn an index listing into an ordered list of deletion candidates."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from es_retention.retention.age import age_in_months, is_expired
from es_retention.retention.patterns import match_index
from es_retention.retention.types import Candidate, DatePattern
from es_retention.telemetry import get_logger
from es_retention.telemetry.events import INDEX_EVALUATED, INDEX_EXPIRED, INDEX_SKIPPED

log = get_logger(__name__)


@dataclass
class RetentionPlan:
    """Result of evaluating a listing against the retention threshold.

    Attributes:
        listed: Number of index names evaluated.
        matched: Names that matched the prefix and date pattern.
        candidates: Expired indices, oldest first.
    """

    listed: int
    matched: list[str] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)


def plan_deletions(
    names: Iterable[str],
    prefix: str,
    pattern: DatePattern,
    older_than_months: int,
    today: date,
) -> RetentionPlan:
    """Select the indices older than ``older_than_months``.

    Pure apart from debug logging: the same listing and ``today`` always yield
    the same plan.

    Args:
        names: Index names as listed by the store.
        prefix: Index prefix to match.
        pattern: Date pattern of the index names.
        older_than_months: Retention threshold in months.
        today: Current date.

    Returns:
        RetentionPlan with candidates ordered oldest first, then by name.
    """
    names = list(names)
    plan = RetentionPlan(listed=len(names))

    for name in names:
        extracted = match_index(name, prefix, pattern)
        if extracted is None:
            log.debug(INDEX_SKIPPED, index=name, reason="pattern_mismatch")
            continue

        plan.matched.append(name)
        age = age_in_months(extracted, today)
        log.debug(INDEX_EVALUATED, index=name, date=str(extracted), age_months=age)

        if is_expired(age, older_than_months):
            plan.candidates.append(Candidate(index=name, date=extracted, age_months=age))
            log.debug(INDEX_EXPIRED, index=name, age_months=age, threshold=older_than_months)

    plan.candidates.sort(key=lambda c: (-c.age_months, c.index))
    return plan
