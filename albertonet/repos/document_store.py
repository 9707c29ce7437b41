import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Optional, TypeVar

from albertonet.exceptions import StorageTransportError
from albertonet.schemas.blog import Post
from albertonet.services.content_parser import ContentParser, build_post

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_BACKOFF_SECONDS = 5.0


class DocumentStore(ABC):
    """
    Read-only access to stored documents, keyed by POSIX-style paths.

    Absence is reported as None / an empty list. Any other failure raises
    StorageTransportError; transient ones are retried with exponential backoff.
    """

    def __init__(
        self,
        retry_attempts: int = 3,
        retry_backoff: float = 0.2,
        parser: Optional[ContentParser] = None,
    ):
        self.retry_attempts = max(1, retry_attempts)
        self.retry_backoff = retry_backoff
        self.parser = parser or ContentParser()

    @abstractmethod
    async def _list(self, prefix: str) -> List[str]: ...

    @abstractmethod
    async def _read(self, path: str) -> Optional[bytes]: ...

    async def list_document_paths(self, prefix: str) -> List[str]:
        return await self._with_retry(prefix, lambda: self._list(prefix))

    async def fetch_by_path(self, path: str) -> Optional[bytes]:
        return await self._with_retry(path, lambda: self._read(path))

    async def fetch_by_prefix_and_name(self, prefix: str, name: str) -> Optional[bytes]:
        return await self.fetch_by_path(f"{prefix}{name}")

    def to_post(self, slug: str, raw: bytes) -> Post:
        return build_post(slug, raw, parser=self.parser)

    async def _with_retry(self, path: str, operation: Callable[[], Awaitable[T]]) -> T:
        delay = self.retry_backoff
        attempt = 1
        while True:
            try:
                return await operation()
            except StorageTransportError as e:
                if not e.transient or attempt >= self.retry_attempts:
                    raise
                logger.warning(
                    f"Transient storage error for {path} "
                    f"(attempt {attempt}/{self.retry_attempts}), retrying in {delay}s: {e.cause}"
                )
                await asyncio.sleep(delay)
                delay = min(delay * 2, MAX_BACKOFF_SECONDS)
                attempt += 1
