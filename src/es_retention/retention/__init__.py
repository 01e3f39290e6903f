"""Index name parsing, age evaluation and deletion planning.

Everything in this package is free of I/O so it can be tested directly.
"""

from es_retention.retention.age import age_in_months, is_expired
from es_retention.retention.patterns import build_index_regex, match_index
from es_retention.retention.planner import RetentionPlan, plan_deletions
from es_retention.retention.types import Candidate, DatePattern, ExtractedDate

__all__ = [
    "DatePattern",
    "ExtractedDate",
    "Candidate",
    "match_index",
    "build_index_regex",
    "age_in_months",
    "is_expired",
    "RetentionPlan",
    "plan_deletions",
]
