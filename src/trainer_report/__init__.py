from __future__ import annotations

"""
trainer_report

Monthly job that scans trainer records from DynamoDB, keeps the trainers with
a positive monthly training duration, and publishes them as a CSV report to S3.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
