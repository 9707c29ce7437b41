import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from albertonet.exceptions import StorageTransportError
from albertonet.repos.document_store import DocumentStore

logger = logging.getLogger(__name__)


class FilesystemDocumentStore(DocumentStore):
    def __init__(self, root: str | Path, **kwargs):
        super().__init__(**kwargs)
        self.root = Path(root).resolve()

    async def _list(self, prefix: str) -> List[str]:
        return await asyncio.to_thread(self._list_sync, prefix)

    async def _read(self, path: str) -> Optional[bytes]:
        return await asyncio.to_thread(self._read_sync, path)

    def _list_sync(self, prefix: str) -> List[str]:
        # Prefix matching is by string, like an object store; walk only the directory part
        directory, _, _ = prefix.rpartition("/")
        base = self._resolve(directory)
        if base is None or not base.is_dir():
            return []

        try:
            keys = [
                file.relative_to(self.root).as_posix()
                for file in base.rglob("*")
                if file.is_file()
            ]
        except OSError as e:
            raise StorageTransportError(prefix, e) from e

        return sorted(key for key in keys if key.startswith(prefix))

    def _read_sync(self, path: str) -> Optional[bytes]:
        file = self._resolve(path)
        if file is None:
            logger.warning(f"Refusing to read path outside content root: {path}")
            return None
        try:
            return file.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return None
        except OSError as e:
            raise StorageTransportError(path, e) from e

    def _resolve(self, key: str) -> Optional[Path]:
        candidate = (self.root / key).resolve()
        if candidate != self.root and not candidate.is_relative_to(self.root):
            return None
        return candidate
