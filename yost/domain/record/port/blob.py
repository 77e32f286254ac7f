"""BlobStore port - opaque content referenced by Record.blob_key."""

from abc import abstractmethod
from typing import Protocol

from yost.domain.shared.model.value import ValueObject
from yost.domain.shared.port import Port


class BlobReceipt(ValueObject):
    key: str
    size: int
    checksum: str


class BlobStore(Port, Protocol):
    @abstractmethod
    async def put(self, key: str, content: bytes) -> BlobReceipt: ...

    @abstractmethod
    async def get(self, key: str) -> bytes | None: ...
