from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import PublishError

logger = logging.getLogger(__name__)

CSV_CONTENT_TYPE = "text/csv"


def upload_report(
    bucket_name: str,
    key: str,
    body: bytes,
    s3: Optional[Any] = None,
) -> None:
    """
    Write the report bytes to ``s3://{bucket_name}/{key}``.

    Any existing object under the same key is replaced. The declared
    content length is the exact byte length of ``body``.
    """
    uri = f"s3://{bucket_name}/{key}"
    logger.info("Uploading report (%d bytes) to %s", len(body), uri)

    try:
        if s3 is None:
            s3 = boto3.client("s3")
        s3.put_object(
            Bucket=bucket_name,
            Key=key,
            Body=body,
            ContentLength=len(body),
            ContentType=CSV_CONTENT_TYPE,
        )
    except (ClientError, BotoCoreError) as exc:
        msg = f"Error uploading to S3 ({uri}): {exc}"
        logger.error(msg, exc_info=True)
        raise PublishError(msg) from exc

    logger.info("Report uploaded to S3 bucket: %s, with file name: %s", bucket_name, key)
