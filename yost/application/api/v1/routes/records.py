"""Records REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from yost.domain.record.command.save_record import (
    RecordSaved,
    SaveRecord,
    SaveRecordHandler,
)
from yost.domain.record.query.find_records import (
    FindRecords,
    FindRecordsHandler,
    RecordList,
)

router = APIRouter(prefix="/records", tags=["Records"], route_class=DishkaRoute)


@router.post("", response_model=RecordSaved, status_code=201)
async def save_record(
    body: SaveRecord,
    handler: FromDishka[SaveRecordHandler],
) -> RecordSaved:
    return await handler.run(body)


@router.get("/{display_name}", response_model=RecordList)
async def find_records(
    display_name: str,
    handler: FromDishka[FindRecordsHandler],
    has_verified_link: bool | None = None,
    is_verified_user: bool | None = None,
) -> RecordList:
    """Records for a display name whose cooldown has elapsed."""
    return await handler.run(
        FindRecords(
            display_name=display_name,
            has_verified_link=has_verified_link,
            is_verified_user=is_verified_user,
        )
    )
