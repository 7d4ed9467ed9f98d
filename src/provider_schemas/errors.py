"""Package specific exception hierarchy."""


class ProviderSchemaError(Exception):
    """Base exception for provider_schemas package."""


class DecodeError(ProviderSchemaError):
    """Raised when a payload cannot be decoded into its declared schema."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field


class MalformedPayload(DecodeError):
    """Raised when the payload is not valid JSON at all."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed JSON payload: {detail}")
        self.detail = detail


class TypeMismatch(DecodeError):
    """Raised when a present field disagrees with its declared type."""

    def __init__(self, field: str, expected: str) -> None:
        location = field or "<root>"
        super().__init__(f"Field '{location}' expected {expected}.", field)
        self.expected = expected


class MissingRequiredField(DecodeError):
    """Raised when a required field is absent from the payload."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Required field '{field}' is missing.", field)


class UnknownVariant(DecodeError):
    """Raised when a discriminator value matches no declared alternative."""

    def __init__(self, value: str, field: str = "") -> None:
        suffix = f" at '{field}'" if field else ""
        super().__init__(f"Unknown variant '{value}'{suffix}.", field)
        self.value = value


class EncodeError(ProviderSchemaError):
    """Raised when a value cannot be serialized as the requested schema."""


class DuplicateVariantTag(ProviderSchemaError):
    """Raised when two alternatives of a variant share a discriminator value."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Discriminator value '{tag}' is used by more than one alternative.")
        self.tag = tag


class ProviderError(ProviderSchemaError):
    """Represents provider-specific HTTP or API errors."""

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        suffix = f" (status {status_code})" if status_code is not None else ""
        super().__init__(f"{provider}: {message}{suffix}")
        self.provider = provider
        self.status_code = status_code
