"""Unit tests for LocalBlobStore."""

import hashlib

import pytest

from yost.domain.shared.error import StorageUnavailableError
from yost.infrastructure.storage.blob import LocalBlobStore


@pytest.fixture
def store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(base_path=str(tmp_path / "blobs"))


class TestLocalBlobStore:
    @pytest.mark.asyncio
    async def test_put_returns_receipt(self, store):
        receipt = await store.put("u1/k1", b"hello")

        assert receipt.key == "u1/k1"
        assert receipt.size == 5
        assert receipt.checksum == f"sha256:{hashlib.sha256(b'hello').hexdigest()}"

    @pytest.mark.asyncio
    async def test_get_returns_stored_content(self, store):
        await store.put("u1/k1", b"hello")

        assert await store.get("u1/k1") == b"hello"

    @pytest.mark.asyncio
    async def test_put_overwrites(self, store):
        await store.put("k1", b"first")
        await store.put("k1", b"second")

        assert await store.get("k1") == b"second"

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store):
        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_put_leaves_no_temp_files(self, store):
        await store.put("k1", b"data")

        assert [p.name for p in store.base_path.iterdir()] == ["k1"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "key", ["../escape", "a/../../escape", "/etc/passwd", "", "a/..", "."]
    )
    async def test_rejects_keys_outside_base_path(self, store, key):
        with pytest.raises(ValueError, match="Invalid blob key"):
            await store.put(key, b"evil")
        with pytest.raises(ValueError, match="Invalid blob key"):
            await store.get(key)
        assert list(store.base_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_write_failure_is_storage_unavailable(self, store):
        # A file where a directory is needed makes mkdir fail
        (store.base_path / "occupied").write_bytes(b"")

        with pytest.raises(StorageUnavailableError):
            await store.put("occupied/k1", b"data")
