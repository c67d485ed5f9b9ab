"""Health check types."""

from enum import Enum
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HealthStatus(str, Enum):
    """Status of a probe or of a whole health check run."""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"


class _HealthModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProbeResult(_HealthModel):
    """Outcome of one timed call against the store."""

    uri: str
    status_code: HealthStatus
    total_milliseconds: int
    target_milliseconds: int
    message: Optional[str] = None


class CapturedError(_HealthModel):
    """Failure detail of a health check run that faulted."""

    type: str
    message: str
    status_code: Optional[int] = None
    activity_id: Optional[str] = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "CapturedError":
        return cls(
            type=type(error).__name__,
            message=str(error),
            status_code=getattr(error, "status_code", None),
            activity_id=getattr(error, "activity_id", None),
        )


class HealthReport(_HealthModel):
    """Aggregate outcome of a health check run."""

    status: HealthStatus
    description: str
    data: dict[str, Union[ProbeResult, str, None]]
    exception: Optional[CapturedError] = None

    @property
    def probes(self) -> dict[str, ProbeResult]:
        return {k: v for k, v in self.data.items() if isinstance(v, ProbeResult)}


def fold_status(values: Iterable[Any]) -> HealthStatus:
    """
    Fold probe results into one overall status.

    Unhealthy is sticky. Until then any non-Healthy probe replaces the
    current status, so a later Degraded re-asserts and Healthy never
    changes it. Values that are not ProbeResults are ignored.
    """
    status = HealthStatus.HEALTHY

    for value in values:
        if status == HealthStatus.UNHEALTHY:
            break
        if isinstance(value, ProbeResult) and value.status_code != HealthStatus.HEALTHY:
            status = value.status_code

    return status
