import unittest

from provider_schemas.errors import TypeMismatch
from provider_schemas.providers.fal import FalFile, FalFluxLoRAFastTrainingOutput

_TRAINING_OUTPUT = b"""{
  "config_file": {
    "content_type": "application/octet-stream",
    "file_name": "config.json",
    "file_size": 1024,
    "url": "https://v3.fal.media/files/lion/config.json"
  },
  "diffusers_lora_file": {
    "url": "https://v3.fal.media/files/lion/pytorch_lora_weights.safetensors"
  }
}"""


class FalTrainingOutputTests(unittest.TestCase):
    def test_decodes_file_metadata(self) -> None:
        output = FalFluxLoRAFastTrainingOutput.deserialize(_TRAINING_OUTPUT)
        self.assertEqual(output.config_file.content_type, "application/octet-stream")
        self.assertEqual(output.config_file.file_name, "config.json")
        self.assertEqual(output.config_file.file_size, 1024)
        self.assertEqual(str(output.config_file.url), "https://v3.fal.media/files/lion/config.json")
        self.assertIsNone(output.diffusers_lora_file.file_name)

    def test_all_fields_are_optional(self) -> None:
        output = FalFluxLoRAFastTrainingOutput.deserialize(b"{}")
        self.assertIsNone(output.config_file)
        self.assertIsNone(output.diffusers_lora_file)

    def test_invalid_url_reports_nested_path(self) -> None:
        with self.assertRaises(TypeMismatch) as ctx:
            FalFluxLoRAFastTrainingOutput.deserialize(b'{"config_file": {"url": "not a url"}}')
        self.assertEqual(ctx.exception.field, "config_file.url")
        self.assertEqual(ctx.exception.expected, "URL")

    def test_wrong_json_types_are_not_coerced(self) -> None:
        with self.assertRaises(TypeMismatch) as ctx:
            FalFile.deserialize(b'{"file_size": "1024"}')
        self.assertEqual(ctx.exception.field, "file_size")
        self.assertEqual(ctx.exception.expected, "integer")

    def test_non_http_urls_are_accepted(self) -> None:
        file = FalFile.deserialize(b'{"url": "s3://fal-results/lion/config.json"}')
        self.assertEqual(str(file.url), "s3://fal-results/lion/config.json")
        self.assertEqual(FalFile.deserialize(file.serialize()), file)

    def test_encoding_omits_absent_metadata(self) -> None:
        file = FalFile(file_name="weights.safetensors", file_size=2048)
        self.assertEqual(file.serialize(), b'{"file_name":"weights.safetensors","file_size":2048}')


if __name__ == "__main__":
    unittest.main()
