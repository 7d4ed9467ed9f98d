import unittest
from datetime import datetime, timezone

from provider_schemas.codec import decode
from provider_schemas.errors import DecodeError, TypeMismatch
from provider_schemas.providers.replicate import (
    ReplicateTrainingResponseBody,
    ReplicateTrainingStatus,
)
from provider_schemas.tolerance import decode_tolerant

# Replicate occasionally emits raw control characters in logs and an object in error.
_FAILED_TRAINING = (
    b'{"id": "zz4ibbonubfz7carwiefibzgga", "model": "ostris/flux-dev-lora-trainer",'
    b' "version": "d995297071a44dcb72244e6c19462111649ec86a9646c32df56daa7f14801944",'
    b' "status": "failed", "error": {"bad": "shape"}, "logs": "x\x00y",'
    b' "created_at": "2024-09-08T12:00:00.123456Z", "started_at": "2024-09-08T12:00:05Z",'
    b' "completed_at": null, "metrics": {"predict_time": 12.5},'
    b' "output": {"version": "owner/model:abc", "weights": "https://replicate.delivery/w.tar"},'
    b' "urls": {"cancel": "https://api.replicate.com/v1/trainings/zz4/cancel",'
    b' "get": "https://api.replicate.com/v1/trainings/zz4"}}'
)


class ReplicateTrainingResponseTests(unittest.TestCase):
    def test_tolerant_decode_strips_logs_and_error(self) -> None:
        body = decode_tolerant(ReplicateTrainingResponseBody, ["error", "logs"], _FAILED_TRAINING)
        self.assertEqual(body.status, ReplicateTrainingStatus.FAILED)
        self.assertFalse(hasattr(body, "logs"))
        self.assertFalse(hasattr(body, "error"))
        self.assertNotIn("logs", body.model_dump())
        self.assertNotIn("error", body.model_dump())

    def test_plain_decode_of_same_payload_fails(self) -> None:
        with self.assertRaises(DecodeError):
            decode(ReplicateTrainingResponseBody, _FAILED_TRAINING)

    def test_escaped_control_character_and_object_error_need_tolerance(self) -> None:
        payload = b'{"status": "failed", "error": {"bad": "shape"}, "logs": "x\\u0000y", "id": "a"}'
        with self.assertRaises(TypeMismatch) as ctx:
            decode(ReplicateTrainingResponseBody, payload)
        self.assertEqual(ctx.exception.field, "logs")
        self.assertEqual(ctx.exception.expected, "string without control characters")

        body = decode_tolerant(ReplicateTrainingResponseBody, ["error", "logs"], payload)
        self.assertEqual(body.id, "a")
        self.assertEqual(body.status, ReplicateTrainingStatus.FAILED)
        self.assertNotIn("logs", body.model_dump())
        self.assertNotIn("error", body.model_dump())

    def test_object_error_alone_fails_plain_decode(self) -> None:
        with self.assertRaises(TypeMismatch) as ctx:
            decode(ReplicateTrainingResponseBody, b'{"status": "failed", "error": {"bad": "shape"}}')
        self.assertEqual(ctx.exception.field, "error")
        self.assertEqual(ctx.exception.expected, "string")

    def test_clean_string_logs_decode_without_tolerance(self) -> None:
        body = decode(ReplicateTrainingResponseBody, b'{"status": "succeeded", "logs": "step 1\\nstep 2", "error": null}')
        self.assertTrue(body.is_terminal)

    def test_deserialize_uses_tolerated_fields(self) -> None:
        body = ReplicateTrainingResponseBody.deserialize(_FAILED_TRAINING)
        self.assertEqual(body.id, "zz4ibbonubfz7carwiefibzgga")
        self.assertEqual(body.metrics.predict_time, 12.5)
        self.assertEqual(body.output.weights, "https://replicate.delivery/w.tar")
        self.assertEqual(str(body.urls.get), "https://api.replicate.com/v1/trainings/zz4")
        self.assertTrue(body.is_terminal)

    def test_timestamps_are_iso8601(self) -> None:
        body = ReplicateTrainingResponseBody.deserialize(_FAILED_TRAINING)
        self.assertEqual(body.started_at, datetime(2024, 9, 8, 12, 0, 5, tzinfo=timezone.utc))
        self.assertEqual(body.created_at.microsecond, 123456)

    def test_null_and_missing_fields_are_distinguishable(self) -> None:
        body = ReplicateTrainingResponseBody.deserialize(b'{"completed_at": null, "status": "starting"}')
        self.assertIsNone(body.completed_at)
        self.assertIsNone(body.started_at)
        self.assertIn("completed_at", body.model_fields_set)
        self.assertNotIn("started_at", body.model_fields_set)
        self.assertFalse(body.is_terminal)

    def test_non_iso_timestamp_is_rejected(self) -> None:
        for raw in (b'"yesterday"', b"1725796800"):
            with self.subTest(raw=raw):
                with self.assertRaises(TypeMismatch) as ctx:
                    ReplicateTrainingResponseBody.deserialize(b'{"created_at": ' + raw + b"}")
                self.assertEqual(ctx.exception.field, "created_at")
                self.assertEqual(ctx.exception.expected, "ISO-8601 datetime")

    def test_unknown_status_is_rejected(self) -> None:
        with self.assertRaises(TypeMismatch) as ctx:
            ReplicateTrainingResponseBody.deserialize(b'{"status": "exploded"}')
        self.assertEqual(ctx.exception.field, "status")

    def test_every_status_decodes(self) -> None:
        for status in ("starting", "processing", "succeeded", "failed", "canceled"):
            with self.subTest(status=status):
                body = ReplicateTrainingResponseBody.deserialize(b'{"status": "%s"}' % status.encode())
                self.assertEqual(body.status.value, status)

    def test_serialize_round_trip(self) -> None:
        body = ReplicateTrainingResponseBody.deserialize(_FAILED_TRAINING)
        self.assertEqual(ReplicateTrainingResponseBody.deserialize(body.serialize()), body)


if __name__ == "__main__":
    unittest.main()
