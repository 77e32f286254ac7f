"""FindRecords query handler - visible records for a display name."""

from yost.domain.record.model.aggregate import Record
from yost.domain.record.service import RecordService
from yost.domain.shared.query import Query, QueryHandler, Result


class FindRecords(Query):
    display_name: str
    has_verified_link: bool | None = None
    is_verified_user: bool | None = None


class RecordList(Result):
    records: list[Record]


class FindRecordsHandler(QueryHandler[FindRecords, RecordList]):
    record_service: RecordService

    async def run(self, query: FindRecords) -> RecordList:
        records = await self.record_service.query(
            display_name=query.display_name,
            has_verified_link=query.has_verified_link,
            is_verified_user=query.is_verified_user,
        )
        return RecordList(records=records)
