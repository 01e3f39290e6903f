"""Extract the month an index belongs to from its name.

An index matches when its name is the configured prefix immediately followed by
a date body and nothing else:

- month: ``YYYY-MM`` or ``YYYY.MM`` (two-digit month, 01-12)
- week: ``YYYY-W`` or ``YYYY-WW`` (ISO week 1-53); the index belongs to the
  month of the Monday that starts the week
"""

import re
from datetime import date
from functools import lru_cache

from es_retention.retention.types import DatePattern, ExtractedDate

_BODIES: dict[DatePattern, str] = {
    DatePattern.MONTH: r"(\d{4})[.-](\d{2})",
    DatePattern.WEEK: r"(\d{4})-(\d{1,2})",
}


@lru_cache(maxsize=32)
def build_index_regex(prefix: str, pattern: DatePattern) -> re.Pattern[str]:
    """Compile the full-match expression for a prefix and date pattern.

    Args:
        prefix: Literal index prefix (escaped, never interpreted as a regex).
        pattern: Date pattern of the index body.

    Returns:
        Compiled regex with the year and month/week as groups 1 and 2.
    """
    return re.compile(re.escape(prefix) + _BODIES[DatePattern(pattern)], re.ASCII)


def match_index(name: str, prefix: str, pattern: DatePattern) -> ExtractedDate | None:
    """Return the month ``name`` belongs to, or None if it does not match.

    Args:
        name: Index name.
        prefix: Configured index prefix.
        pattern: Configured date pattern.

    Returns:
        ExtractedDate for matching names; None for wrong prefixes, malformed or
        trailing date bodies, months outside 01-12 and weeks that do not exist
        in their ISO year.
    """
    match = build_index_regex(prefix, pattern).fullmatch(name)
    if match is None:
        return None

    year, part = int(match.group(1)), int(match.group(2))
    try:
        if pattern == DatePattern.MONTH:
            return ExtractedDate(year, part)
        if not 1 <= part <= 53:
            return None
        return ExtractedDate.from_date(date.fromisocalendar(year, part, 1))
    except ValueError:
        # month outside 1-12, year 0000, or a week the ISO year does not have
        return None
