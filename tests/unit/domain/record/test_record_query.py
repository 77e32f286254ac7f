"""Unit tests for RecordService.query (visibility and attribute filters)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from yost.domain.record.model.value import AttributeFilter
from yost.domain.record.port.store import RecordStore
from yost.domain.record.service.record import RecordService
from yost.domain.shared.error import StorageUnavailableError


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _item(created_at: int = 1000, visible_after: int = 1600, **extra) -> dict:
    return {
        "display_name": "u1",
        "blob_key": f"k{created_at}",
        "created_at": created_at,
        "visible_after": visible_after,
        **extra,
    }


@pytest.fixture
def mock_record_store() -> RecordStore:
    store = MagicMock(spec=RecordStore)
    store.put = AsyncMock()
    store.query = AsyncMock(return_value=[])
    return store


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1600)


@pytest.fixture
def service(mock_record_store: RecordStore, clock: FakeClock) -> RecordService:
    return RecordService(record_store=mock_record_store, clock=clock)


class TestVisibilityFilter:
    @pytest.mark.asyncio
    async def test_excludes_records_still_in_cooldown(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(visible_after=1601)]

        assert await service.query(display_name="u1") == []

    @pytest.mark.asyncio
    async def test_includes_record_at_boundary_second(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(visible_after=1600)]

        records = await service.query(display_name="u1")

        assert len(records) == 1
        assert records[0].display_name == "u1"

    @pytest.mark.asyncio
    async def test_cooldown_applies_regardless_of_flags(self, service, mock_record_store):
        mock_record_store.query.return_value = [
            _item(
                visible_after=2000,
                has_verified_link=True,
                verification_link="L",
                is_verified_user=True,
            )
        ]

        assert await service.query(display_name="u1") == []
        assert await service.query(display_name="u1", has_verified_link=True) == []
        assert await service.query(display_name="u1", is_verified_user=True) == []
        assert (
            await service.query(display_name="u1", has_verified_link=True, is_verified_user=True)
            == []
        )

    @pytest.mark.asyncio
    async def test_preserves_store_order(self, service, mock_record_store):
        mock_record_store.query.return_value = [
            _item(created_at=900, visible_after=1500),
            _item(created_at=500, visible_after=1100),
            _item(created_at=950, visible_after=1700),
        ]

        records = await service.query(display_name="u1")

        assert [r.created_at for r in records] == [900, 500]

    @pytest.mark.asyncio
    async def test_no_matches_is_empty_not_error(self, service, mock_record_store):
        mock_record_store.query.return_value = []

        assert await service.query(display_name="nobody") == []


class TestVerifiedUserFilter:
    @pytest.mark.asyncio
    async def test_unverified_included_when_not_requested(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(), _item(created_at=999, is_verified_user=True)]

        records = await service.query(display_name="u1")

        assert len(records) == 2

    @pytest.mark.asyncio
    async def test_unverified_excluded_when_requested(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(), _item(created_at=999, is_verified_user=True)]

        records = await service.query(display_name="u1", is_verified_user=True)

        assert [r.created_at for r in records] == [999]

    @pytest.mark.asyncio
    async def test_false_flag_does_not_filter(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(), _item(created_at=999, is_verified_user=True)]

        records = await service.query(display_name="u1", is_verified_user=False)

        assert len(records) == 2

    @pytest.mark.asyncio
    async def test_explicit_false_attribute_is_unverified(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item(is_verified_user=False)]

        assert await service.query(display_name="u1", is_verified_user=True) == []


class TestStoreLookup:
    @pytest.mark.asyncio
    async def test_plain_lookup_has_no_filter(self, service, mock_record_store):
        await service.query(display_name="u1")

        mock_record_store.query.assert_called_once_with("u1", None)

    @pytest.mark.asyncio
    async def test_verified_link_pushed_down_to_store(self, service, mock_record_store):
        await service.query(display_name="u1", has_verified_link=True)

        mock_record_store.query.assert_called_once_with(
            "u1", AttributeFilter(attribute="has_verified_link", value=True)
        )

    @pytest.mark.asyncio
    async def test_verified_user_is_not_pushed_down(self, service, mock_record_store):
        await service.query(display_name="u1", is_verified_user=True)

        mock_record_store.query.assert_called_once_with("u1", None)

    @pytest.mark.asyncio
    async def test_missing_optional_attributes_read_as_defaults(self, service, mock_record_store):
        mock_record_store.query.return_value = [_item()]

        [record] = await service.query(display_name="u1")

        assert record.has_verified_link is False
        assert record.is_verified_user is False
        assert record.verification_link == ""

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, service, mock_record_store):
        mock_record_store.query.side_effect = StorageUnavailableError("down")

        with pytest.raises(StorageUnavailableError):
            await service.query(display_name="u1")


class TestCooldownScenario:
    @pytest.mark.asyncio
    async def test_record_becomes_visible_after_cooldown(self, mock_record_store, clock):
        """Saved at t=1000, hidden at t=1500, visible at t=1600."""
        stored: list[dict] = []

        async def put(record):
            stored.append(record.model_dump())

        async def query(display_name, attribute_filter=None):
            return [item for item in stored if item["display_name"] == display_name]

        mock_record_store.put.side_effect = put
        mock_record_store.query.side_effect = query
        service = RecordService(record_store=mock_record_store, clock=clock)

        clock.now = 1000
        record = await service.save(display_name="u1", blob_key="k1")
        assert (record.created_at, record.visible_after) == (1000, 1600)

        clock.now = 1500
        assert await service.query(display_name="u1") == []

        clock.now = 1600
        assert await service.query(display_name="u1") == [record]
