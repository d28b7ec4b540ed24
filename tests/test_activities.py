"""Integration tests for the activity feed."""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.services.activity import get_activity_page
from chatter.views import LIST_UNAVAILABLE
from tests.seeds import Social


@pytest.mark.asyncio
async def test_feed_first_page_is_newest_first(client: AsyncClient, feed: Social) -> None:
    resp = await client.get("/activities")

    assert resp.status_code == 200
    assert resp.text.count('class="activity"') == 10
    assert "event 11" in resp.text
    assert "event 02" in resp.text
    assert "event 01" not in resp.text
    assert "Page 1 of 2" in resp.text
    assert 'href="?page=2"' in resp.text


@pytest.mark.asyncio
async def test_feed_second_page(client: AsyncClient, feed: Social) -> None:
    resp = await client.get("/activities", params={"page": 2})

    assert resp.text.count('class="activity"') == 2
    assert "event 01" in resp.text
    assert "event 00" in resp.text
    assert "Page 2 of 2" in resp.text


@pytest.mark.asyncio
async def test_feed_names_sender_and_receiver(client: AsyncClient, feed: Social) -> None:
    resp = await client.get("/activities")

    assert "Alice event 11 Bob" in resp.text


@pytest.mark.asyncio
async def test_empty_feed(client: AsyncClient, db: AsyncSession) -> None:
    resp = await client.get("/activities")

    assert resp.status_code == 200
    assert "Nothing has happened yet." in resp.text
    assert "Page 1 of 0" in resp.text


@pytest.mark.asyncio
async def test_feed_store_failure_renders_error_page(
    client: AsyncClient, feed: Social, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _store_down(*args: object, **kwargs: object) -> None:
        raise SQLAlchemyError("feed offline")

    monkeypatch.setattr("chatter.services.activity.list_activities", _store_down)

    resp = await client.get("/activities")

    assert resp.status_code == 500
    assert LIST_UNAVAILABLE in resp.text
    assert "feed offline" not in resp.text


@pytest.mark.asyncio
async def test_get_activity_page(db: AsyncSession, feed: Social) -> None:
    result = await get_activity_page(db, page=1, per_page=5)

    assert [activity.activity_stream for activity in result.items] == [
        "event 06",
        "event 05",
        "event 04",
        "event 03",
        "event 02",
    ]
    assert result.total == 12
    assert result.pages == 3
