from dishka import provide

from yost.config import Config
from yost.domain.record.port.blob import BlobStore
from yost.infrastructure.storage.blob import LocalBlobStore
from yost.util.di.base import Provider
from yost.util.di.scope import Scope


class StorageProvider(Provider):
    @provide(scope=Scope.APP)
    def get_blob_store(self, config: Config) -> BlobStore:
        return LocalBlobStore(base_path=config.blobs.base_path)
