import hashlib
import logging
import tempfile
from pathlib import Path

from yost.domain.record.port.blob import BlobReceipt, BlobStore
from yost.domain.shared.error import StorageUnavailableError

logger = logging.getLogger(__name__)


class LocalBlobStore(BlobStore):
    """Local filesystem implementation of BlobStore.

    Keys may contain "/" to group blobs into subdirectories, but must stay
    inside ``base_path``.
    """

    def __init__(self, base_path: str) -> None:
        self.base_path = Path(base_path).expanduser()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _safe_path(self, key: str) -> Path:
        """Resolve key within base_path, rejecting path traversal attempts."""
        if not key or key.startswith("/") or "\\" in key:
            raise ValueError(f"Invalid blob key: {key}")
        target = self.base_path / key
        root = self.base_path.resolve()
        resolved = target.resolve()
        if resolved == root or not resolved.is_relative_to(root):
            raise ValueError(f"Invalid blob key: {key}")
        return target

    async def put(self, key: str, content: bytes) -> BlobReceipt:
        target = self._safe_path(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # Atomic write: write to temp file then rename
            fd, tmp_path = tempfile.mkstemp(dir=target.parent)
            try:
                with open(fd, "wb") as f:
                    f.write(content)
                Path(tmp_path).replace(target)
            except Exception:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageUnavailableError(f"Blob store unavailable: {e}") from e

        checksum = hashlib.sha256(content).hexdigest()
        logger.debug("Blob stored: %s (%d bytes)", key, len(content))
        return BlobReceipt(key=key, size=len(content), checksum=f"sha256:{checksum}")

    async def get(self, key: str) -> bytes | None:
        target = self._safe_path(key)
        if not target.is_file():
            return None
        try:
            return target.read_bytes()
        except OSError as e:
            raise StorageUnavailableError(f"Blob store unavailable: {e}") from e
