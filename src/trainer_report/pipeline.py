from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from .dynamodb_client import scan_records
from .exceptions import ConfigurationError, ReportJobError
from .filters import ReportRow, SkipCounter, filter_records
from .s3_client import upload_report

logger = logging.getLogger(__name__)

BUCKET_ENV_VAR = "BUCKET_NAME"
TABLE_ENV_VAR = "DYNAMO_TABLE_NAME"

REPORT_COLUMNS = ("Trainer First Name", "Trainer Last Name", "Monthly Training Duration")
REPORT_KEY_PREFIX = "Trainers_Trainings_summary_"
CSV_LINE_TERMINATOR = "\r\n"

SUCCESS_MESSAGE = "Report Generated and Uploaded Successfully"
FAILURE_PREFIX = "Error in generating and uploading report: "


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for the report job, validated once at construction."""

    bucket_name: str
    table_name: str

    def __post_init__(self) -> None:
        missing = [
            name
            for name, value in (("bucket_name", self.bucket_name), ("table_name", self.table_name))
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required report settings: {', '.join(missing)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportConfig":
        """
        Build the config from ``BUCKET_NAME`` and ``DYNAMO_TABLE_NAME``.

        Raises ConfigurationError naming every variable that is unset or empty.
        """
        env = os.environ if environ is None else environ
        missing = [var for var in (BUCKET_ENV_VAR, TABLE_ENV_VAR) if not env.get(var)]
        if missing:
            raise ConfigurationError(f"Environment variable(s) not set: {', '.join(missing)}")
        return cls(bucket_name=env[BUCKET_ENV_VAR], table_name=env[TABLE_ENV_VAR])


@dataclass
class JobResult:
    """Outcome of one report run: either the published object or the error that aborted it."""

    success: bool
    bucket: Optional[str] = None
    key: Optional[str] = None
    row_count: int = 0
    skipped_count: int = 0
    byte_count: int = 0
    error: Optional[ReportJobError] = None

    @property
    def message(self) -> str:
        if self.success:
            return SUCCESS_MESSAGE
        return f"{FAILURE_PREFIX}{self.error}"


def build_report_key(ref_date: date) -> str:
    """Object key for the month of ``ref_date``, e.g. Trainers_Trainings_summary_2025_03.csv."""
    return f"{REPORT_KEY_PREFIX}{ref_date:%Y_%m}.csv"


def encode_report(rows: Iterable[ReportRow]) -> bytes:
    """
    Render report rows as UTF-8 CSV bytes.

    The header is always written, so an empty input yields a header-only
    document. Rows keep their input order.
    """
    frame = pd.DataFrame([tuple(row) for row in rows], columns=list(REPORT_COLUMNS))

    with io.StringIO() as buf:
        frame.to_csv(buf, index=False, lineterminator=CSV_LINE_TERMINATOR)
        text = buf.getvalue()

    return text.encode("utf-8")


def run_report_job(
    config: ReportConfig,
    today: Optional[date] = None,
    dynamodb: Optional[Any] = None,
    s3: Optional[Any] = None,
) -> JobResult:
    """
    Run the full report job:

    1. Scan every record of the DynamoDB table.
    2. Keep records with a positive MonthlyTrainingDuration.
    3. Encode the kept rows as CSV.
    4. Upload the CSV to S3 under the key of the current month.

    Typed job errors are returned in the JobResult instead of raised. Nothing
    is uploaded unless encoding has completed.
    """
    ref_date = today or date.today()
    logger.info("Starting report job with config: %s", config)

    skipped = SkipCounter()
    try:
        records = scan_records(config.table_name, dynamodb=dynamodb)
        rows = list(filter_records(records, skipped))
        logger.info("Kept %d row(s), skipped %d record(s) without a positive duration", len(rows), skipped.count)

        body = encode_report(rows)
        logger.info("Data fetched and CSV report generated.")

        key = build_report_key(ref_date)
        upload_report(config.bucket_name, key, body, s3=s3)
    except ReportJobError as exc:
        logger.error("%s%s", FAILURE_PREFIX, exc)
        return JobResult(success=False, skipped_count=skipped.count, error=exc)

    logger.info(SUCCESS_MESSAGE)
    return JobResult(
        success=True,
        bucket=config.bucket_name,
        key=key,
        row_count=len(rows),
        skipped_count=skipped.count,
        byte_count=len(body),
    )
