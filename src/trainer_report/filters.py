from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Iterator, Mapping, NamedTuple, Optional

DURATION_FIELD = "MonthlyTrainingDuration"
FIRST_NAME_FIELD = "TrainerFirstName"
LAST_NAME_FIELD = "TrainerLastName"


class ReportRow(NamedTuple):
    """One trainer line of the monthly report."""

    first_name: str
    last_name: str
    duration: int


class SkipCounter:
    """Counts records left out of the report (missing or non-positive duration)."""

    def __init__(self) -> None:
        self.count = 0

    def __int__(self) -> int:
        return self.count


def _as_int(value: Any) -> Optional[int]:
    """Integer value of a DynamoDB number, truncated toward zero; None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value).strip()) if isinstance(value, str) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not number.is_finite():
        return None
    return int(number)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def to_report_row(record: Mapping[str, Any]) -> Optional[ReportRow]:
    """
    Project a table record into a report row.

    Returns None unless ``MonthlyTrainingDuration`` is present, numeric, and
    strictly positive. Such records are skipped, not treated as errors.
    """
    duration = _as_int(record.get(DURATION_FIELD))
    if duration is None or duration <= 0:
        return None

    return ReportRow(
        first_name=_as_text(record.get(FIRST_NAME_FIELD)),
        last_name=_as_text(record.get(LAST_NAME_FIELD)),
        duration=duration,
    )


def filter_records(
    records: Iterable[Mapping[str, Any]],
    skipped: Optional[SkipCounter] = None,
) -> Iterator[ReportRow]:
    """Yield the report rows for qualifying records, in input order."""
    for record in records:
        row = to_report_row(record)
        if row is None:
            if skipped is not None:
                skipped.count += 1
            continue
        yield row
