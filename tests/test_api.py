from __future__ import annotations

import httpx
import pytest

from loe_status.config import Settings
from loe_status.main import create_app
from tests.helpers import group_text, schedule_markup

TODAY = schedule_markup(
    group_text("з 00:00 до 02:00", group="1.1"),
    group_text("з 05:30 до 12:30, з 16:00 до 21:00, з 22:00 до 24:00"),
    as_of="05:10 18.02.2026",
)
TOMORROW = schedule_markup(group_text("з 00:00 до 02:00, з 06:00 до 10:00"), as_of=None)


def _client(settings: Settings | None = None) -> httpx.AsyncClient:
    app = create_app(settings or Settings())
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://testserver")


@pytest.mark.asyncio
async def test_status_endpoint_reports_outage() -> None:
    async with _client() as client:
        response = await client.post(
            "/v1/status",
            json={"todayMarkup": TODAY, "group": "1.2", "now": "2026-02-18T06:00:00+02:00"},
        )
    assert response.status_code == 200
    body = response.json()
    assert body["group"] == "1.2"
    assert body["status"]["isOn"] is False
    assert body["status"]["minutesUntilChange"] == 390
    assert body["status"]["hasTomorrowSchedule"] is False
    assert body["infoAsOf"] == "2026-02-18T05:10:00+02:00"
    assert body["today"]["intervals"][0] == {
        "start": "2026-02-18T05:30:00+02:00",
        "end": "2026-02-18T12:30:00+02:00",
    }
    assert body["today"]["totalOutageHours"] == 14
    assert body["tomorrow"] is None
    assert len(body["digest"]) == 64


@pytest.mark.asyncio
async def test_status_endpoint_continues_into_tomorrow() -> None:
    async with _client() as client:
        response = await client.post(
            "/v1/status",
            json={
                "todayMarkup": TODAY,
                "tomorrowMarkup": TOMORROW,
                "group": 12,
                "now": "2026-02-18T23:00:00+02:00",
            },
        )
    assert response.status_code == 200
    body = response.json()
    assert body["group"] == "1.2"
    assert body["status"] == {
        "state": "off",
        "isOn": False,
        "minutesUntilChange": 180,
        "isTomorrow": True,
        "tomorrowFirstOutage": "00:00",
        "hasTomorrowSchedule": True,
    }
    assert body["tomorrow"]["intervals"][0]["start"] == "2026-02-19T00:00:00+02:00"


@pytest.mark.asyncio
async def test_status_endpoint_uses_default_group() -> None:
    async with _client(Settings(default_group="1.1")) as client:
        response = await client.post(
            "/v1/status",
            json={"todayMarkup": TODAY, "now": "2026-02-18T01:00:00+02:00"},
        )
    assert response.status_code == 200
    assert response.json()["group"] == "1.1"
    assert response.json()["status"]["minutesUntilChange"] == 60


@pytest.mark.asyncio
async def test_status_endpoint_missing_group_is_404() -> None:
    async with _client() as client:
        response = await client.post("/v1/status", json={"todayMarkup": TODAY, "group": "6.2"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_status_endpoint_rejects_invalid_group() -> None:
    async with _client() as client:
        response = await client.post("/v1/status", json={"todayMarkup": TODAY, "group": "7"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_fingerprint_ignores_info_timestamp() -> None:
    later = TODAY.replace("05:10 18.02.2026", "09:40 18.02.2026")
    async with _client() as client:
        first = await client.post("/v1/fingerprint", json={"todayMarkup": TODAY, "tomorrowMarkup": TOMORROW})
        second = await client.post("/v1/fingerprint", json={"todayMarkup": later, "tomorrowMarkup": TOMORROW})
        changed = await client.post("/v1/fingerprint", json={"todayMarkup": later})
    assert first.status_code == 200
    assert first.json()["digest"] == second.json()["digest"]
    assert first.json()["fingerprint"] == second.json()["fingerprint"]
    assert changed.json()["digest"] != first.json()["digest"]


@pytest.mark.asyncio
async def test_fingerprint_for_missing_schedule() -> None:
    async with _client() as client:
        response = await client.post("/v1/fingerprint", json={"todayMarkup": "", "group": "1.2"})
    assert response.status_code == 200
    assert "не знайдено" in response.json()["fingerprint"]


@pytest.mark.asyncio
async def test_metrics_and_health() -> None:
    async with _client() as client:
        await client.post(
            "/v1/status",
            json={"todayMarkup": TODAY, "now": "2026-02-18T22:30:00+02:00"},
        )
        health = await client.get("/healthz")
        metrics = await client.get("/metrics")
    assert health.json() == {"status": "ok", "timezone": "Europe/Kyiv", "defaultGroup": "1.2"}
    assert metrics.status_code == 200
    assert 'loe_status_evaluations_total{state="off"} 1.0' in metrics.text
    assert 'loe_schedule_lookups_total{result="found"} 1.0' in metrics.text


@pytest.mark.asyncio
async def test_metrics_can_be_disabled() -> None:
    async with _client(Settings(enable_metrics=False)) as client:
        response = await client.get("/metrics")
    assert response.status_code == 404
