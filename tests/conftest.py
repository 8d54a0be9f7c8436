"""Shared test fixtures for livestream_search tests."""

import asyncio
import threading
from datetime import datetime, timedelta, timezone

import pytest
from aiohttp import web

from livestream_search.core.models import Entry
from livestream_search.core.settings import TwitchSettings

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_record(
    user_name="Streamer",
    title="Playing some games",
    viewer_count=42,
    language="en",
    started_at=None,
):
    """Build one stream record as returned by the Helix streams endpoint."""
    if started_at is None:
        started_at = (NOW - timedelta(minutes=90)).strftime("%Y-%m-%dT%H:%M:%SZ")
    return {
        "id": "40457151671",
        "user_id": "1234",
        "user_login": user_name.lower(),
        "user_name": user_name,
        "game_id": "1469308723",
        "type": "live",
        "title": title,
        "viewer_count": viewer_count,
        "started_at": started_at,
        "language": language,
        "tags": [],
        "is_mature": False,
    }


def make_entry(display_name="Streamer", title="Playing some games", viewer_count=42):
    return Entry(
        language="en",
        display_name=display_name,
        title=title,
        viewer_count=viewer_count,
        live_duration="01:30",
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    return TwitchSettings(client_id="test-client-id", access_token="test-token")


@pytest.fixture
def entry():
    return make_entry()


@pytest.fixture
def twitch_env(monkeypatch):
    monkeypatch.setenv("TWITCH_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("TWITCH_TOKEN", "test-token")
    monkeypatch.delenv("TWITCH_IGNORE", raising=False)
    monkeypatch.delenv("https_proxy", raising=False)


@pytest.fixture
def http_server():
    """Start local aiohttp apps on a background loop; returns a starter taking a handler."""
    servers = []

    def start(handler):
        loop = asyncio.new_event_loop()
        app = web.Application()
        app.router.add_get("/helix/streams", handler)
        runner = web.AppRunner(app)
        loop.run_until_complete(runner.setup())
        site = web.TCPSite(runner, "127.0.0.1", 0)
        loop.run_until_complete(site.start())
        host, port = runner.addresses[0][:2]

        thread = threading.Thread(target=loop.run_forever, daemon=True)
        thread.start()
        servers.append((loop, runner, thread))
        return f"http://{host}:{port}/helix"

    yield start

    for loop, runner, thread in servers:
        asyncio.run_coroutine_threadsafe(runner.cleanup(), loop).result(timeout=10)
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=10)
        loop.close()
