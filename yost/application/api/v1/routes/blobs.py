"""Blob content REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response

from yost.domain.record.port.blob import BlobReceipt, BlobStore

router = APIRouter(prefix="/blobs", tags=["Blobs"], route_class=DishkaRoute)


@router.put("/{key:path}", response_model=BlobReceipt, status_code=201)
async def put_blob(
    key: str,
    request: Request,
    store: FromDishka[BlobStore],
) -> BlobReceipt:
    content = await request.body()
    try:
        return await store.put(key, content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{key:path}")
async def get_blob(
    key: str,
    store: FromDishka[BlobStore],
) -> Response:
    try:
        content = await store.get(key)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if content is None:
        raise HTTPException(status_code=404, detail="Blob not found")
    return Response(content=content, media_type="application/octet-stream")
