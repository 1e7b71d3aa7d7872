from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from loe_status.core.groups import parse_group_from_api
from loe_status.core.serialization import (
    intervals_to_payload,
    optional_isoformat,
    status_to_payload,
)
from loe_status.engine.fingerprint import fingerprint, fingerprint_digest
from loe_status.engine.status import evaluate, schedule_intervals
from loe_status.parsers.intervals import total_outage_hours
from loe_status.parsers.markup import (
    extract_group_text,
    extract_info_text,
    extract_schedule_text,
    parse_info_timestamp,
)

router = APIRouter()
_logger = logging.getLogger("loe.api")


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    today_markup: str = Field(default="", alias="todayMarkup")
    tomorrow_markup: str | None = Field(default=None, alias="tomorrowMarkup")
    group: str | int | None = None
    now: datetime | None = None


def _resolve_group(request: Request, body: ScheduleRequest) -> str:
    raw = body.group or request.app.state.settings.default_group
    group = parse_group_from_api(raw)
    if group is None:
        raise HTTPException(status_code=422, detail=f"Invalid group label: {raw!r}")
    return group


def _resolve_now(request: Request, body: ScheduleRequest) -> datetime:
    if body.now is not None:
        return body.now
    return datetime.now(tz=ZoneInfo(request.app.state.settings.timezone_name))


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "timezone": settings.timezone_name,
        "defaultGroup": settings.default_group,
    }


@router.post("/v1/status")
async def electricity_status(request: Request, body: ScheduleRequest) -> dict:
    settings = request.app.state.settings
    metrics = request.app.state.metrics
    group = _resolve_group(request, body)

    today = extract_schedule_text(body.today_markup, group)
    metrics.mark_lookup(today is not None)
    if today is None:
        _logger.info("Schedule for group %s not found in today's markup", group)
        raise HTTPException(status_code=404, detail=f"Schedule for group {group} is unavailable")

    today_text = today.raw_text
    tomorrow_text = extract_group_text(body.tomorrow_markup, group)
    now, today_intervals, tomorrow_intervals = schedule_intervals(
        today_text, tomorrow_text, _resolve_now(request, body), settings.timezone_name
    )

    with metrics.evaluation_duration_seconds.time():
        status = evaluate(today_intervals, tomorrow_intervals, now, tomorrow_text=tomorrow_text)
    metrics.mark_evaluation(status)

    content = fingerprint(today_text, tomorrow_text, group)
    metrics.mark_fingerprint()

    info_as_of = parse_info_timestamp(extract_info_text(body.today_markup), settings.timezone_name)
    return {
        "group": today.group_label,
        "now": now.isoformat(),
        "infoAsOf": optional_isoformat(info_as_of),
        "status": status_to_payload(status),
        "today": {
            "text": today_text,
            "intervals": intervals_to_payload(today_intervals),
            "totalOutageHours": total_outage_hours(today_intervals),
        },
        "tomorrow": (
            {
                "text": tomorrow_text,
                "intervals": intervals_to_payload(tomorrow_intervals),
                "totalOutageHours": total_outage_hours(tomorrow_intervals),
            }
            if tomorrow_text is not None
            else None
        ),
        "fingerprint": content,
        "digest": fingerprint_digest(content),
    }


@router.post("/v1/fingerprint")
async def schedule_fingerprint(request: Request, body: ScheduleRequest) -> dict:
    metrics = request.app.state.metrics
    group = _resolve_group(request, body)

    today_text = extract_group_text(body.today_markup, group)
    metrics.mark_lookup(today_text is not None)
    tomorrow_text = extract_group_text(body.tomorrow_markup, group)

    content = fingerprint(today_text, tomorrow_text, group)
    metrics.mark_fingerprint()
    return {
        "group": group,
        "fingerprint": content,
        "digest": fingerprint_digest(content),
    }


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    if not request.app.state.settings.enable_metrics:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)
