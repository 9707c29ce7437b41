import asyncio
import logging
from typing import Any, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from albertonet.exceptions import StorageTransportError
from albertonet.repos.document_store import DocumentStore

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODES = {"NoSuchKey", "NotFound", "404"}

# Throttling and service side failures are worth another attempt
TRANSIENT_ERROR_CODES = {
    "ThrottlingException",
    "TooManyRequestsException",
    "SlowDown",
    "RequestTimeout",
    "ServiceUnavailable",
    "InternalError",
    "InternalFailure",
    "InternalServerError",
}


class S3DocumentStore(DocumentStore):
    """
    Documents stored as objects in a single S3 bucket.

    Listing issues a single ListObjectsV2 request capped at `max_items` keys;
    it does not follow continuation tokens, so callers that need every key
    under a large prefix must paginate on their own.
    """

    def __init__(self, client: Any, bucket: str, max_items: int = 5, **kwargs):
        super().__init__(**kwargs)
        self.client = client
        self.bucket = bucket
        self.max_items = max_items

    async def _list(self, prefix: str) -> List[str]:
        return await asyncio.to_thread(self._list_sync, prefix)

    async def _read(self, path: str) -> Optional[bytes]:
        return await asyncio.to_thread(self._read_sync, path)

    def _list_sync(self, prefix: str) -> List[str]:
        try:
            response = self.client.list_objects_v2(
                Bucket=self.bucket, Prefix=prefix, MaxKeys=self.max_items
            )
        except (ClientError, BotoCoreError) as e:
            raise _transport_error(prefix, e) from e

        if response.get("IsTruncated"):
            logger.info(
                f"Listing of {prefix} was capped at {self.max_items} keys"
            )

        contents = response.get("Contents") or []
        return [item["Key"] for item in contents if item.get("Key")]

    def _read_sync(self, path: str) -> Optional[bytes]:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=path)
            return response["Body"].read()
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_ERROR_CODES:
                return None
            raise _transport_error(path, e) from e
        except BotoCoreError as e:
            raise _transport_error(path, e) from e


def _error_code(e: ClientError) -> str:
    return str(e.response.get("Error", {}).get("Code", ""))


def _transport_error(path: str, e: Exception) -> StorageTransportError:
    if isinstance(e, ClientError):
        status = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode") or 0
        transient = _error_code(e) in TRANSIENT_ERROR_CODES or status >= 500
    else:
        # Connection and timeout errors from botocore itself
        transient = True
    logger.error(f"S3 request for {path} failed: {e}")
    return StorageTransportError(path, e, transient=transient)
