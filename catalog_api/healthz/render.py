"""Health report representations: plain text, native JSON and IETF health+json."""

from typing import Any, Optional

from catalog_store import HealthReport, HealthStatus

JSON = "json"
IETF = "ietf"

IETF_MEDIA_TYPE = "application/health+json"

IETF_STATUS = {
    HealthStatus.HEALTHY: "pass",
    HealthStatus.DEGRADED: "warn",
    HealthStatus.UNHEALTHY: "fail",
}


def resolve_format(report_type: Optional[str]) -> Optional[str]:
    """Match a requested representation case-insensitively; None if unknown."""
    if report_type is None:
        return None
    normalized = report_type.lower()
    if normalized in (JSON, IETF):
        return normalized
    return None


def drop_nulls(value: Any) -> Any:
    """Recursively remove None values from dicts and lists."""
    if isinstance(value, dict):
        return {k: drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [drop_nulls(v) for v in value if v is not None]
    return value


def render_text(status: HealthStatus) -> str:
    return status.value


def render_json(report: HealthReport) -> dict[str, Any]:
    """The full report with camelCase keys and no null fields."""
    return drop_nulls(report.model_dump(mode="json", by_alias=True))


def render_ietf(report: HealthReport, service_id: str) -> dict[str, Any]:
    """
    Transform a report into the IETF draft health check response format.

    Each probe becomes a ``<name>:responseTime`` check measured in
    milliseconds against its threshold.
    """
    checks: dict[str, list[dict[str, Any]]] = {}

    for name, probe in report.probes.items():
        checks[f"{name}:responseTime"] = [
            {
                "status": IETF_STATUS[probe.status_code],
                "componentId": name,
                "componentType": "datastore",
                "observedValue": probe.total_milliseconds,
                "observedUnit": "ms",
                "targetValue": probe.target_milliseconds,
                "affectedEndpoints": [probe.uri],
                "output": probe.message,
            }
        ]

    instance = report.data.get("instance")
    version = report.data.get("version")

    return drop_nulls(
        {
            "status": IETF_STATUS[report.status],
            "serviceId": service_id,
            "description": report.description,
            "instance": instance if isinstance(instance, str) else None,
            "version": version if isinstance(version, str) else None,
            "output": report.exception.message if report.exception else None,
            "checks": checks,
        }
    )
