"""Replicate training schemas.

The response body is shared by the "create a training" and "get a training"
endpoints:
    https://replicate.com/docs/reference/http#create-a-training
    https://replicate.com/docs/reference/http#get-a-training
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import AnyUrl

from provider_schemas.providers.base import WireModel
from provider_schemas.types import IsoDatetime


class ReplicateTrainingStatus(str, Enum):
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


_TERMINAL_STATUSES = frozenset(
    {ReplicateTrainingStatus.SUCCEEDED, ReplicateTrainingStatus.FAILED, ReplicateTrainingStatus.CANCELED}
)


class ReplicateTrainingMetrics(WireModel):
    predict_time: float | None = None


class ReplicateTrainingOutput(WireModel):
    version: str | None = None
    weights: str | None = None


class ReplicateActionURLs(WireModel):
    """URLs to cancel the training or fetch its result."""

    cancel: AnyUrl | None = None
    get: AnyUrl | None = None


class ReplicateTrainingResponseBody(WireModel):
    """Response body for a Replicate training.

    Replicate documents ``logs`` and ``error`` as strings but sometimes sends
    objects or control characters in them. Plain decoding rejects such values;
    ``deserialize`` strips both fields first, and neither is modeled.
    """

    tolerated_fields: ClassVar[tuple[str, ...]] = ("logs", "error")

    completed_at: IsoDatetime | None = None
    created_at: IsoDatetime | None = None
    id: str | None = None
    metrics: ReplicateTrainingMetrics | None = None
    model: str | None = None
    output: ReplicateTrainingOutput | None = None
    started_at: IsoDatetime | None = None
    status: ReplicateTrainingStatus | None = None
    urls: ReplicateActionURLs | None = None
    # The version of the model that ran.
    version: str | None = None

    @property
    def is_terminal(self) -> bool:
        """True once the training can no longer change status."""
        return self.status in _TERMINAL_STATUSES
