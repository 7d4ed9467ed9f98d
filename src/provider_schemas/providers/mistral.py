"""Mistral chat completion schemas.

Field docs from https://docs.mistral.ai/api/#tag/chat
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from provider_schemas.providers.base import WireModel


class MistralAssistantMessage(WireModel):
    role: Literal["assistant"] = "assistant"
    content: str


class MistralSystemMessage(WireModel):
    role: Literal["system"] = "system"
    content: str


class MistralUserMessage(WireModel):
    role: Literal["user"] = "user"
    content: str


MistralMessage = Annotated[
    Union[MistralAssistantMessage, MistralSystemMessage, MistralUserMessage],
    Field(discriminator="role"),
]


class MistralJsonObjectResponseFormat(WireModel):
    """Enables JSON mode, which ensures the generated message is valid JSON.

    When using JSON mode you must also instruct the model to produce JSON
    yourself via a system or user message.
    """

    type: Literal["json_object"] = "json_object"


class MistralTextResponseFormat(WireModel):
    """Instructs the model to produce text only."""

    type: Literal["text"] = "text"


MistralResponseFormat = Annotated[
    Union[MistralJsonObjectResponseFormat, MistralTextResponseFormat],
    Field(discriminator="type"),
]


class MistralChatCompletionRequestBody(WireModel):
    """Request body for the Mistral chat completions endpoint.

    Acceptable ranges noted below are documented by Mistral and are not
    enforced here; the API is the authority on what it accepts.
    """

    # The prompt(s) to generate completions for.
    messages: list[MistralMessage]
    # ID of the model to use. See https://docs.mistral.ai/models
    model: str

    # Penalizes words by how frequently they already appear. Range [-2, 2], default 0.
    frequency_penalty: float | None = None
    # Prompt tokens plus max_tokens cannot exceed the model's context length.
    max_tokens: int | None = None
    # Number of completions to return; input tokens are only billed once.
    n: int | None = None
    # Penalizes words that have appeared at all. Range [-2, 2], default 0.
    presence_penalty: float | None = None
    response_format: MistralResponseFormat | None = None
    # Whether to inject a safety prompt before all conversations. Default false.
    safe_prompt: bool | None = None
    # If set, different calls will generate deterministic results.
    seed: int | None = None
    # Stop generation if one of these tokens is detected.
    stop: list[str] | None = None
    # Whether to stream back partial progress. Default false.
    stream: bool | None = None
    # Recommended between 0.0 and 0.7. Range [0, 1], default varies per model.
    temperature: float | None = None
    # Nucleus sampling mass. Alter this or temperature, not both. Range [0, 1], default 1.
    top_p: float | None = None

    def with_streaming(self) -> MistralChatCompletionRequestBody:
        """Return a copy of this request that asks for a streamed response."""
        return self.model_copy(update={"stream": True})
