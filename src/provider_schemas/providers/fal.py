"""Fal schemas.

Field docs from https://fal.ai/models/fal-ai/flux-lora-fast-training/api#schema-output
"""

from __future__ import annotations

from pydantic import AnyUrl

from provider_schemas.providers.base import WireModel


class FalFile(WireModel):
    """A remote file produced by a Fal job."""

    # The mime type of the file.
    content_type: str | None = None
    # The name of the file. It will be auto-generated if not provided.
    file_name: str | None = None
    # The size of the file in bytes.
    file_size: int | None = None
    # The URL where the file can be downloaded from.
    url: AnyUrl | None = None


class FalFluxLoRAFastTrainingOutput(WireModel):
    """Output of the flux-lora-fast-training endpoint."""

    # Remote training configuration file.
    config_file: FalFile | None = None
    # Remote file holding the trained diffusers lora weights.
    diffusers_lora_file: FalFile | None = None
