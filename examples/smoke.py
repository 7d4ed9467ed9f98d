from provider_schemas.errors import DecodeError
from provider_schemas.providers.mistral import (
    MistralChatCompletionRequestBody,
    MistralJsonObjectResponseFormat,
    MistralSystemMessage,
    MistralUserMessage,
)
from provider_schemas.providers.replicate import ReplicateTrainingResponseBody


def main() -> None:
    body = MistralChatCompletionRequestBody(
        messages=[
            MistralSystemMessage(content="Reply in JSON."),
            MistralUserMessage(content="hi"),
        ],
        model="mistral-small-latest",
        response_format=MistralJsonObjectResponseFormat(),
    )
    print("Request:", body.serialize().decode())

    # Replicate sometimes sends undecodable logs; the tolerant path strips them.
    training = ReplicateTrainingResponseBody.deserialize(b'{"status": "failed", "logs": "x\x00y"}')
    print("Training status:", training.status.value)

    try:
        ReplicateTrainingResponseBody.deserialize(b'{"status": "exploded"}')
    except DecodeError as e:
        print("Expected error:", type(e).__name__, e)


if __name__ == "__main__":
    main()
