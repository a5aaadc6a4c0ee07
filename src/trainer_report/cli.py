from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError, PublishError
from .pipeline import BUCKET_ENV_VAR, TABLE_ENV_VAR, ReportConfig, run_report_job

EXIT_DATA_SOURCE = 1
EXIT_PUBLISH = 2
EXIT_CONFIGURATION = 3
EXIT_UNEXPECTED = 99


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Export trainers with a positive monthly training duration from DynamoDB "
            "as a CSV report stored in S3."
        )
    )

    parser.add_argument(
        "--bucket-name",
        default=None,
        help=f"S3 bucket receiving the report (default: ${BUCKET_ENV_VAR}).",
    )

    parser.add_argument(
        "--table-name",
        default=None,
        help=f"DynamoDB table holding the trainer records (default: ${TABLE_ENV_VAR}).",
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )

    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> ReportConfig:
    """Command-line values win over the environment."""
    environ = dict(os.environ)
    if args.bucket_name:
        environ[BUCKET_ENV_VAR] = args.bucket_name
    if args.table_name:
        environ[TABLE_ENV_VAR] = args.table_name
    return ReportConfig.from_env(environ)


def main(argv: Optional[list[str]] = None) -> None:
    # Load .env file if present
    load_dotenv()

    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        config = _build_config(args)
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        sys.exit(EXIT_CONFIGURATION)

    try:
        result = run_report_job(config)
    except Exception:  # pragma: no cover - generic catch-all
        print("[ERROR] Unexpected error while running the report job.", file=sys.stderr)
        logging.getLogger(__name__).exception("Unexpected error")
        sys.exit(EXIT_UNEXPECTED)

    if not result.success:
        print(f"[ERROR] {result.message}", file=sys.stderr)
        if isinstance(result.error, PublishError):
            sys.exit(EXIT_PUBLISH)
        sys.exit(EXIT_DATA_SOURCE)

    print(result.message)
    print(f"Report written to: s3://{result.bucket}/{result.key} ({result.row_count} row(s))")


if __name__ == "__main__":  # pragma: no cover
    main()
