"""Result types of a retention run."""

from dataclasses import dataclass, field
from enum import Enum

from es_retention.retention.types import Candidate


class DeleteOutcome(str, Enum):
    """What happened to one candidate index."""

    DELETED = "deleted"
    ALREADY_ABSENT = "already_absent"
    FAILED = "failed"


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of deleting one candidate.

    Attributes:
        candidate: The index that was deleted (or not).
        outcome: DELETED, ALREADY_ABSENT or FAILED.
        error: Error message for FAILED outcomes.
        acknowledged: Whether the store acknowledged the deletion.
    """

    candidate: Candidate
    outcome: DeleteOutcome
    error: str | None = None
    acknowledged: bool = True


@dataclass
class RunReport:
    """Summary of a retention run.

    Attributes:
        dry_run: True if nothing was deleted on purpose.
        listed: Number of indices returned by the store.
        matched: Number of indices matching prefix and date pattern.
        candidates: Indices older than the threshold, oldest first.
        results: One entry per candidate in live mode; empty in dry-run.
    """

    dry_run: bool
    listed: int
    matched: int
    candidates: list[Candidate] = field(default_factory=list)
    results: list[DeletionResult] = field(default_factory=list)

    def _count(self, outcome: DeleteOutcome) -> int:
        return sum(1 for r in self.results if r.outcome is outcome)

    @property
    def deleted_count(self) -> int:
        return self._count(DeleteOutcome.DELETED)

    @property
    def already_absent_count(self) -> int:
        return self._count(DeleteOutcome.ALREADY_ABSENT)

    @property
    def failed(self) -> list[DeletionResult]:
        return [r for r in self.results if r.outcome is DeleteOutcome.FAILED]

    @property
    def success(self) -> bool:
        """True unless at least one deletion failed."""
        return not self.failed
