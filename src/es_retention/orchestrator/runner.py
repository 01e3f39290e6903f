"""Retention run: list, plan, then delete sequentially (or only report).

Deletions run one at a time in plan order. A failed deletion is recorded and
the run moves on to the next index; only a failed listing aborts the run.
"""

from datetime import date, datetime, timezone

from es_retention.config.run_config import RetentionConfig
from es_retention.index_client.types import IndexClientError, IndexStore, NotFoundError
from es_retention.orchestrator.types import DeleteOutcome, DeletionResult, RunReport
from es_retention.retention.planner import plan_deletions
from es_retention.retention.types import Candidate
from es_retention.telemetry import get_logger
from es_retention.telemetry.events import (
    DRYRUN_WOULD_DELETE,
    INDEX_ALREADY_ABSENT,
    INDEX_DELETE_FAILED,
    INDEX_DELETED,
    INDICES_LISTED,
    NOTHING_TO_DELETE,
    RETENTION_RUN_COMPLETED,
    RETENTION_RUN_STARTED,
)

log = get_logger(__name__)


def utc_today() -> date:
    """Current date in UTC."""
    return datetime.now(timezone.utc).date()


def _delete_one(store: IndexStore, candidate: Candidate) -> DeletionResult:
    """Delete one candidate, converting client errors into a result."""
    try:
        acknowledged = store.delete_index(candidate.index)
    except NotFoundError:
        log.info(INDEX_ALREADY_ABSENT, index=candidate.index)
        return DeletionResult(candidate=candidate, outcome=DeleteOutcome.ALREADY_ABSENT)
    except IndexClientError as e:
        log.error(
            INDEX_DELETE_FAILED,
            index=candidate.index,
            error=str(e),
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        return DeletionResult(
            candidate=candidate, outcome=DeleteOutcome.FAILED, error=str(e), acknowledged=False
        )

    if acknowledged:
        log.info(INDEX_DELETED, index=candidate.index, age_months=candidate.age_months)
    else:
        log.warning(
            INDEX_DELETED,
            index=candidate.index,
            age_months=candidate.age_months,
            acknowledged=False,
        )
    return DeletionResult(
        candidate=candidate, outcome=DeleteOutcome.DELETED, acknowledged=acknowledged
    )


def run_retention(
    config: RetentionConfig, store: IndexStore, today: date | None = None
) -> RunReport:
    """Run one retention pass against ``store``.

    Args:
        config: Validated run configuration.
        store: Index store to list from and delete in.
        today: Date to measure ages against. Defaults to today in UTC.

    Returns:
        RunReport with the candidates and, in live mode, one result per candidate.

    Raises:
        IndexClientError: If listing fails; nothing is deleted in that case.
    """
    today = today or utc_today()
    log.info(
        RETENTION_RUN_STARTED,
        index_prefix=config.index_prefix,
        date_pattern=config.date_pattern.value,
        older_than_months=config.older_than_months,
        dry_run=config.dry_run,
        today=today.isoformat(),
    )

    names = store.list_indices()
    log.info(INDICES_LISTED, count=len(names))

    plan = plan_deletions(
        names,
        prefix=config.index_prefix,
        pattern=config.date_pattern,
        older_than_months=config.older_than_months,
        today=today,
    )
    report = RunReport(
        dry_run=config.dry_run,
        listed=plan.listed,
        matched=len(plan.matched),
        candidates=plan.candidates,
    )

    if not plan.candidates:
        log.info(NOTHING_TO_DELETE, matched=report.matched)
    elif config.dry_run:
        for candidate in plan.candidates:
            log.info(DRYRUN_WOULD_DELETE, index=candidate.index, age_months=candidate.age_months)
    else:
        for candidate in plan.candidates:
            report.results.append(_delete_one(store, candidate))

    log.info(
        RETENTION_RUN_COMPLETED,
        dry_run=report.dry_run,
        listed=report.listed,
        matched=report.matched,
        candidates=len(report.candidates),
        deleted=report.deleted_count,
        already_absent=report.already_absent_count,
        failed=len(report.failed),
    )
    return report
