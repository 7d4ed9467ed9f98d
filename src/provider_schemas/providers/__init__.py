"""Provider schema definitions for provider_schemas."""

from .base import WireModel
from .fal import FalFile, FalFluxLoRAFastTrainingOutput
from .mistral import (
    MistralAssistantMessage,
    MistralChatCompletionRequestBody,
    MistralJsonObjectResponseFormat,
    MistralMessage,
    MistralResponseFormat,
    MistralSystemMessage,
    MistralTextResponseFormat,
    MistralUserMessage,
)
from .replicate import (
    ReplicateActionURLs,
    ReplicateTrainingMetrics,
    ReplicateTrainingOutput,
    ReplicateTrainingResponseBody,
    ReplicateTrainingStatus,
)

__all__ = [
    "WireModel",
    "FalFile",
    "FalFluxLoRAFastTrainingOutput",
    "MistralAssistantMessage",
    "MistralChatCompletionRequestBody",
    "MistralJsonObjectResponseFormat",
    "MistralMessage",
    "MistralResponseFormat",
    "MistralSystemMessage",
    "MistralTextResponseFormat",
    "MistralUserMessage",
    "ReplicateActionURLs",
    "ReplicateTrainingMetrics",
    "ReplicateTrainingOutput",
    "ReplicateTrainingResponseBody",
    "ReplicateTrainingStatus",
]
