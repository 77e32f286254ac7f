"""Holdings reporting REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from yost.domain.reporting.model.value import Holding
from yost.domain.reporting.service.holdings import HoldingsService

router = APIRouter(prefix="/holdings", tags=["Holdings"], route_class=DishkaRoute)


class LinkTokenRequest(BaseModel):
    user_id: str | None = None


class LinkTokenResponse(BaseModel):
    link_token: str


class ExchangeRequest(BaseModel):
    public_token: str


class ExchangeResponse(BaseModel):
    access_token: str


class HoldingsRequest(BaseModel):
    access_token: str


class HoldingsResponse(BaseModel):
    holdings: list[Holding]


@router.post("/link-token", response_model=LinkTokenResponse)
async def create_link_token(
    body: LinkTokenRequest,
    service: FromDishka[HoldingsService],
) -> LinkTokenResponse:
    return LinkTokenResponse(link_token=await service.create_link_token(body.user_id))


@router.post("/exchange", response_model=ExchangeResponse)
async def exchange_token(
    body: ExchangeRequest,
    service: FromDishka[HoldingsService],
) -> ExchangeResponse:
    return ExchangeResponse(access_token=await service.exchange_token(body.public_token))


@router.post("", response_model=HoldingsResponse)
async def get_holdings(
    body: HoldingsRequest,
    service: FromDishka[HoldingsService],
) -> HoldingsResponse:
    """Holdings are fetched with a POST so the access token stays out of URLs."""
    return HoldingsResponse(holdings=await service.get_holdings(body.access_token))
