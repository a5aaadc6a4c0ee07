"""
AWS Lambda entry point for the monthly trainer report.

The trigger payload is ignored. The handler always returns a single
human-readable status string, success or failure.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from .exceptions import ConfigurationError
from .pipeline import FAILURE_PREFIX, ReportConfig, run_report_job

logger = logging.getLogger(__name__)

# The Lambda runtime leaves the root logger at WARNING.
logging.getLogger("trainer_report").setLevel(logging.INFO)


def handler(event: Any, context: Any) -> str:
    logger.info("Function execution started on: %s", datetime.now().isoformat())

    try:
        config = ReportConfig.from_env()
    except ConfigurationError as exc:
        logger.error("%s%s", FAILURE_PREFIX, exc)
        return f"{FAILURE_PREFIX}{exc}"

    try:
        return run_report_job(config).message
    except Exception as exc:
        logger.exception("Unexpected error")
        return f"{FAILURE_PREFIX}{exc}"
