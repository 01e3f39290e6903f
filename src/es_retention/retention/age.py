"""Index age in whole months and the delete decision."""

from datetime import date

from es_retention.retention.types import ExtractedDate


def age_in_months(extracted: ExtractedDate, today: date) -> int:
    """Whole months between the index's month and the month of ``today``.

    Args:
        extracted: Month the index belongs to.
        today: Current date; only its year and month are used.

    Returns:
        Month difference. Negative for indices dated in the future.
    """
    return (today.year * 12 + today.month) - (extracted.year * 12 + extracted.month)


def is_expired(age_months: int, older_than_months: int) -> bool:
    """Return True if an index of ``age_months`` should be deleted.

    The comparison is strict: an index exactly ``older_than_months`` old is kept.

    Args:
        age_months: Age of the index in whole months.
        older_than_months: Retention threshold in months.

    Returns:
        True if age exceeds the threshold.
    """
    return age_months > older_than_months
