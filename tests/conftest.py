from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest
from botocore.exceptions import ClientError


def make_client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeTable:
    """Serves pre-built scan pages, chaining them through LastEvaluatedKey."""

    def __init__(self, pages: List[List[Dict[str, Any]]], error: Optional[Exception] = None):
        self.pages = pages
        self.error = error
        self.scan_calls: List[Dict[str, Any]] = []

    def scan(self, **kwargs):
        self.scan_calls.append(kwargs)
        if self.error is not None:
            raise self.error
        index = kwargs.get("ExclusiveStartKey", {}).get("page", 0)
        response: Dict[str, Any] = {"Items": self.pages[index] if self.pages else []}
        if index + 1 < len(self.pages):
            response["LastEvaluatedKey"] = {"page": index + 1}
        return response


class FakeDynamoDB:
    def __init__(self, table: FakeTable):
        self.table = table
        self.requested: List[str] = []

    def Table(self, name: str) -> FakeTable:
        self.requested.append(name)
        return self.table


class FakeS3:
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.put_calls: List[Dict[str, Any]] = []

    def put_object(self, **kwargs):
        if self.error is not None:
            raise self.error
        self.put_calls.append(kwargs)
        return {"ETag": '"fake"'}


def trainer(first: str, last: str, duration: Any = None) -> Dict[str, Any]:
    item: Dict[str, Any] = {"TrainerFirstName": first, "TrainerLastName": last}
    if duration is not None:
        item["MonthlyTrainingDuration"] = Decimal(duration) if type(duration) is int else duration
    return item


@pytest.fixture
def fake_s3() -> FakeS3:
    return FakeS3()
