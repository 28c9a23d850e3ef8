"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ContentSearch.config import load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "elasticsearch": {
            "host": "http://localhost:9200",
            "content_index": "content",
            "channel_index": "channel",
            "timeout": 30,
            "max_attempts": 3,
            "api_key_env": "ES_API_KEY",
        },
    }


_OVERRIDE_YAML = """
log:
  level: debug

elasticsearch:
  content_index: content-v2
"""


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.elasticsearch.content_index, "content")
        self.assertEqual(cfg.elasticsearch.channel_index, "channel")
        self.assertEqual(cfg.elasticsearch.timeout, 30.0)
        self.assertEqual(cfg.elasticsearch.api_key_env, "ES_API_KEY")
        self.assertIsNone(cfg.elasticsearch.username)

    def test_optional_keys_default(self) -> None:
        raw = _base_raw_config()
        for key in ("timeout", "max_attempts", "api_key_env"):
            del raw["elasticsearch"][key]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.elasticsearch.max_attempts, 3)
        self.assertIsNone(cfg.elasticsearch.api_key_env)

    def test_missing_section_error_contains_key(self) -> None:
        raw = _base_raw_config()
        del raw["elasticsearch"]
        with self.assertRaisesRegex(ValueError, "elasticsearch"):
            parse_config_dict(raw)

    def test_missing_index_error_contains_key(self) -> None:
        raw = _base_raw_config()
        del raw["elasticsearch"]["channel_index"]
        with self.assertRaisesRegex(ValueError, "elasticsearch.channel_index"):
            parse_config_dict(raw)

    def test_wrong_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["elasticsearch"]["max_attempts"] = "3"
        with self.assertRaisesRegex(TypeError, "elasticsearch.max_attempts"):
            parse_config_dict(raw)

    def test_invalid_host_scheme(self) -> None:
        raw = _base_raw_config()
        raw["elasticsearch"]["host"] = "localhost:9200"
        with self.assertRaisesRegex(ValueError, "elasticsearch.host"):
            parse_config_dict(raw)

    def test_invalid_log_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log.level"):
            parse_config_dict(raw)

    def test_log_level_aliases_and_defaults(self) -> None:
        raw = _base_raw_config()
        raw["log"] = {"level": " warn "}
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.runtime.level, "WARNING")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.runtime.dir, "log")

    def test_empty_log_dir_rejected_only_with_file_logging(self) -> None:
        raw = _base_raw_config()
        raw["log"]["dir"] = " "
        parse_config_dict(raw)
        raw["log"]["to_file"] = True
        with self.assertRaisesRegex(ValueError, "log.dir"):
            parse_config_dict(raw)

    def test_repository_default_file_parses(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.elasticsearch.host, "http://localhost:9200")

    def test_override_merges_over_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(_OVERRIDE_YAML, encoding="utf-8")
            cfg = load_config_with_defaults(override_path, default_path=REPO_ROOT / "config" / "default.yml")

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.elasticsearch.content_index, "content-v2")
        self.assertEqual(cfg.elasticsearch.channel_index, "channel")


if __name__ == "__main__":
    unittest.main()
