import logging

from botocore.exceptions import NoRegionError

from trainer_report import handler as handler_module
from trainer_report.exceptions import DataSourceError
from trainer_report.pipeline import JobResult


def test_handler_reports_missing_configuration(monkeypatch):
    monkeypatch.delenv("BUCKET_NAME", raising=False)
    monkeypatch.delenv("DYNAMO_TABLE_NAME", raising=False)

    message = handler_module.handler({"anything": 1}, None)

    assert message.startswith("Error in generating and uploading report: ")
    assert "DYNAMO_TABLE_NAME" in message


def test_handler_returns_job_message(monkeypatch):
    monkeypatch.setenv("BUCKET_NAME", "reports")
    monkeypatch.setenv("DYNAMO_TABLE_NAME", "trainers")
    configs = []

    def fake_run_report_job(config):
        configs.append(config)
        return JobResult(success=False, error=DataSourceError("scan exploded"))

    monkeypatch.setattr(handler_module, "run_report_job", fake_run_report_job)

    message = handler_module.handler(None, None)

    assert message == "Error in generating and uploading report: scan exploded"
    assert configs[0].table_name == "trainers"


def test_handler_returns_text_for_unexpected_errors(monkeypatch):
    monkeypatch.setenv("BUCKET_NAME", "reports")
    monkeypatch.setenv("DYNAMO_TABLE_NAME", "trainers")

    def exploding_job(config):
        raise RuntimeError("connection pool exhausted")

    monkeypatch.setattr(handler_module, "run_report_job", exploding_job)

    message = handler_module.handler({}, None)

    assert message == "Error in generating and uploading report: connection pool exhausted"


def test_handler_without_region_returns_failure_text(monkeypatch):
    monkeypatch.setenv("BUCKET_NAME", "reports")
    monkeypatch.setenv("DYNAMO_TABLE_NAME", "trainers")

    def no_region(*args, **kwargs):
        raise NoRegionError()

    monkeypatch.setattr("trainer_report.dynamodb_client.boto3.resource", no_region)

    message = handler_module.handler(None, None)

    assert message.startswith("Error in generating and uploading report: ")
    assert "You must specify a region" in message


def test_package_logs_at_info_under_lambda():
    assert logging.getLogger("trainer_report").level == logging.INFO
    assert logging.getLogger("trainer_report.pipeline").isEnabledFor(logging.INFO)
