from dishka import provide

from yost.domain.record.command.save_record import SaveRecordHandler
from yost.domain.record.port.store import RecordStore
from yost.domain.record.query.find_records import FindRecordsHandler
from yost.domain.record.service import RecordService
from yost.util.di.base import Provider
from yost.util.di.scope import Scope


class RecordProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_record_service(self, record_store: RecordStore) -> RecordService:
        return RecordService(record_store=record_store)

    # Command handlers
    save_record_handler = provide(SaveRecordHandler, scope=Scope.UOW)

    # Query handlers
    find_records_handler = provide(FindRecordsHandler, scope=Scope.UOW)
