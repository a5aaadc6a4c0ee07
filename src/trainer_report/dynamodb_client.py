from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import DataSourceError

logger = logging.getLogger(__name__)


def scan_records(table_name: str, dynamodb: Optional[Any] = None) -> Iterator[Dict[str, Any]]:
    """
    Lazily yield every item of a DynamoDB table.

    The scan is a single sequential pass: each page is requested only after the
    previous one has been consumed, following ``LastEvaluatedKey`` until the
    table is exhausted. The generator is not restartable; issue a new call to
    scan again.

    Expected attributes per item:
      - TrainerFirstName (S)
      - TrainerLastName (S)
      - MonthlyTrainingDuration (N, optional)
    """
    logger.info("Fetching data from DynamoDB table: %s", table_name)

    try:
        if dynamodb is None:
            dynamodb = boto3.resource("dynamodb")
        table = dynamodb.Table(table_name)
    except (ClientError, BotoCoreError) as exc:
        msg = f"Failed to open DynamoDB table {table_name}: {exc}"
        logger.error(msg, exc_info=True)
        raise DataSourceError(msg) from exc

    scan_kwargs: Dict[str, Any] = {}
    pages = 0
    items = 0

    while True:
        try:
            response = table.scan(**scan_kwargs)
        except (ClientError, BotoCoreError) as exc:
            msg = f"Failed to scan DynamoDB table {table_name}: {exc}"
            logger.error(msg, exc_info=True)
            raise DataSourceError(msg) from exc

        pages += 1
        page_items = response.get("Items", [])
        logger.debug("Read page %d with %d item(s) from %s", pages, len(page_items), table_name)

        for item in page_items:
            items += 1
            yield item

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break
        scan_kwargs["ExclusiveStartKey"] = last_key

    logger.info("Scanned %d item(s) in %d page(s) from DynamoDB table %s", items, pages, table_name)
