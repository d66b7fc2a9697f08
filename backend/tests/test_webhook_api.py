"""
ConfTrack Backend: Webhook Endpoint Tests
=========================================

What:  POST /recordings/webhook/recording-started over HTTP.
How:   httpx AsyncClient + ASGITransport; the DB dependency points at the
       per-test SQLite database (see conftest.test_client).
"""

import logging
from datetime import datetime, timezone

import pytest
from sqlalchemy import select

from conftrack.config import settings
from conftrack.middleware.request_id import resolve_request_id
from conftrack.models import ConferenceSession, Recording

WEBHOOK_URL = "/recordings/webhook/recording-started"
FAILURE_BODY = {"status": "failure", "message": "Failed to process recording start event."}


@pytest.mark.asyncio
async def test_standup_scenario_succeeds(test_client, session_factory, session_99, webhook_body):
    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "message": "Recording start event received successfully.",
    }

    async with session_factory() as session:
        row = await session.get(ConferenceSession, 99)
        assert row.recording_url == "https://store/rec1.mp4"
        recording = (await session.execute(select(Recording))).scalar_one()
        assert recording.file_path == "https://store/rec1.mp4"
        assert recording.created_at == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_missing_session_returns_failure_and_keeps_recording(
    test_client, session_factory, conference_42, webhook_body, monkeypatch
):
    """Sequential mode: uniform failure over HTTP, but the Recording is persisted."""
    monkeypatch.setattr(settings, "webhook_transaction_mode", "sequential")

    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 404
    assert response.json() == FAILURE_BODY

    async with session_factory() as session:
        recording = (await session.execute(select(Recording))).scalar_one()
    assert recording.conference_id == 42
    assert recording.tenant_id == 7


@pytest.mark.asyncio
async def test_missing_session_atomic_persists_nothing(
    test_client, session_factory, conference_42, webhook_body
):
    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 404
    assert response.json() == FAILURE_BODY

    async with session_factory() as session:
        assert (await session.execute(select(Recording))).scalars().all() == []


@pytest.mark.asyncio
async def test_all_failure_kinds_look_identical(test_client, conference_42, webhook_body):
    """Validation and not-found failures produce the same status and body."""
    bad_ids = {**webhook_body, "data": {**webhook_body["data"], "tenant_id": "seven"}}

    invalid = await test_client.post(WEBHOOK_URL, json=bad_ids)
    missing = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert invalid.status_code == missing.status_code == 404
    assert invalid.json() == missing.json() == FAILURE_BODY


@pytest.mark.asyncio
async def test_structured_errors_expose_kind(test_client, conference_42, webhook_body, monkeypatch):
    monkeypatch.setattr(settings, "webhook_structured_errors", True)

    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 404
    assert response.json() == {**FAILURE_BODY, "error_code": "not_found"}


@pytest.mark.asyncio
async def test_tenant_name_and_host_fields_are_accepted(test_client, session_99, webhook_body):
    webhook_body["data"]["tenant_name"] = "Acme"

    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_malformed_envelope_is_rejected_by_schema(test_client):
    response = await test_client.post(WEBHOOK_URL, json={"event": "recording.started"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_webhook_recording_visible_through_crud(test_client, session_99, webhook_body):
    """Webhook and CRUD share one datastore."""
    await test_client.post(WEBHOOK_URL, json=webhook_body)

    response = await test_client.get("/recordings")

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 1
    assert items[0]["file_path"] == "https://store/rec1.mp4"
    assert items[0]["conference_id"] == 42
    assert items[0]["tenant_id"] == 7


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client, session_99, webhook_body):
    response = await test_client.post(
        WEBHOOK_URL, json=webhook_body, headers={"X-Request-ID": "evt-123"}
    )

    assert response.headers["X-Request-ID"] == "evt-123"


@pytest.mark.asyncio
async def test_oversized_tenant_id_reports_validation_code(
    test_client, session_99, webhook_body, monkeypatch
):
    monkeypatch.setattr(settings, "webhook_structured_errors", True)
    webhook_body["data"]["tenant_id"] = "99999999999999999999999"

    response = await test_client.post(WEBHOOK_URL, json=webhook_body)

    assert response.status_code == 404
    assert response.json() == {**FAILURE_BODY, "error_code": "validation"}


@pytest.mark.asyncio
async def test_access_line_carries_webhook_correlation(
    test_client, conference_42, webhook_body, caplog
):
    caplog.set_level(logging.INFO, logger="conftrack.access")

    await test_client.post(WEBHOOK_URL, json=webhook_body, headers={"X-Request-ID": "evt-7"})

    access = [r for r in caplog.records if r.name == "conftrack.access"]
    assert len(access) == 1
    line = access[0].getMessage()
    assert line.startswith(f"POST {WEBHOOK_URL} 404 ")
    assert "[evt-7]" in line
    assert line.endswith("event=recording.started session=99")
    assert access[0].levelno == logging.WARNING


@pytest.mark.asyncio
async def test_crud_access_line_has_no_webhook_fields(test_client, caplog):
    caplog.set_level(logging.INFO, logger="conftrack.access")

    await test_client.get("/conferences")
    await test_client.get("/health")

    lines = [r.getMessage() for r in caplog.records if r.name == "conftrack.access"]
    assert len(lines) == 1
    assert lines[0].startswith("GET /conferences 200 ")
    assert "event=" not in lines[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("supplied", ["", "has spaces", "x" * 65, "semi;colon"])
async def test_unusable_request_id_is_replaced(test_client, supplied):
    response = await test_client.get("/health", headers={"X-Request-ID": supplied})

    rid = response.headers["X-Request-ID"]
    assert rid != supplied
    assert len(rid) == 12


def test_resolve_request_id():
    assert resolve_request_id("delivery-42:a.b_c") == "delivery-42:a.b_c"
    assert resolve_request_id(None) != resolve_request_id(None)
