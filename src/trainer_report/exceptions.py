from __future__ import annotations


class ReportJobError(RuntimeError):
    """Base class for failures that abort the report job."""


class ConfigurationError(ReportJobError):
    """Raised when required job settings are missing or empty."""


class DataSourceError(ReportJobError):
    """Raised when reading records from the DynamoDB table fails."""


class PublishError(ReportJobError):
    """Raised when writing the report to S3 fails."""
