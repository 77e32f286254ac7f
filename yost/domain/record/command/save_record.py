import logfire
from pydantic import Field

from yost.domain.record.model.aggregate import Record
from yost.domain.record.service import RecordService
from yost.domain.shared.command import Command, CommandHandler, Result


class SaveRecord(Command):
    display_name: str = Field(min_length=1)
    blob_key: str
    has_verified_link: bool = False
    visible_after: int | None = None
    is_verified_user: bool = False
    verification_link: str | None = None


class RecordSaved(Result):
    record: Record


class SaveRecordHandler(CommandHandler[SaveRecord, RecordSaved]):
    record_service: RecordService

    async def run(self, cmd: SaveRecord) -> RecordSaved:
        with logfire.span("SaveRecord"):
            record = await self.record_service.save(
                display_name=cmd.display_name,
                blob_key=cmd.blob_key,
                has_verified_link=cmd.has_verified_link,
                visible_after=cmd.visible_after,
                is_verified_user=cmd.is_verified_user,
                verification_link=cmd.verification_link,
            )
            logfire.info(
                "Record saved",
                display_name=record.display_name,
                visible_after=record.visible_after,
            )
            return RecordSaved(record=record)
