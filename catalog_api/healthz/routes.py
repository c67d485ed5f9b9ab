"""FastAPI routes for the /healthz endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog_api.config import ApiConfig
from catalog_api.dependencies import build_health_check
from catalog_api.healthz.render import (
    IETF,
    IETF_MEDIA_TYPE,
    render_ietf,
    render_json,
    render_text,
    resolve_format,
)

logger = logging.getLogger(__name__)

HEALTHZ_CONTROLLER_EXCEPTION = "HealthzControllerException"

router = APIRouter(prefix="/healthz", tags=["healthz"])


@router.get("", response_class=PlainTextResponse)
async def run_healthz(request: Request):
    """Plain text health status: Healthy, Degraded or Unhealthy."""
    logger.info("run_healthz")

    try:
        report = await build_health_check(request).run()
        return PlainTextResponse(render_text(report.status))
    except Exception:
        logger.exception("Exception:RunHealthz")
        return PlainTextResponse(HEALTHZ_CONTROLLER_EXCEPTION, status_code=500)


@router.get("/{report_type}")
async def run_healthz_report(report_type: str, request: Request):
    """Full health report as JSON (``json``) or IETF health+json (``ietf``)."""
    logger.info("run_healthz_report:%s", report_type)

    fmt = resolve_format(report_type)
    if fmt is None:
        raise HTTPException(status_code=404, detail="Not Found")

    api_config: ApiConfig = request.app.state.api_config
    report = await build_health_check(request).run()

    if fmt == IETF:
        return JSONResponse(
            render_ietf(report, api_config.service_id),
            media_type=IETF_MEDIA_TYPE,
        )

    return JSONResponse(render_json(report))
