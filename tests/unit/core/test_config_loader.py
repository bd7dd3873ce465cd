import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from core.config_loader import load_config, AppConfig
from core.llm.openai_service import DEFAULT_BASE_URL, DEFAULT_MODEL

_CLEAN_ENV = {
    k: v for k, v in os.environ.items()
    if k not in ("LLM_BASE_URL", "LLM_API_KEY", "GEMINI_API_KEY", "LLM_MODEL", "WEB_HOST", "WEB_PORT")
}


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "llm": {
                "base_url": "http://ollama:11434/v1",
                "model": "qwen3:14b",
                "temperature": 0.2,
                "max_attempts": 5
            },
            "agent": {"default_location": "Berlin", "discovery_count": 8},
            "web": {"host": "0.0.0.0", "port": 9000}
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def _load(self, config_yaml, env=None):
        with patch.dict(os.environ, {**_CLEAN_ENV, **(env or {})}, clear=True):
            with patch("builtins.open", mock_open(read_data=config_yaml)):
                with patch("os.path.exists", return_value=True):
                    return load_config("dummy_path.yaml")

    def test_load_config_from_yaml(self):
        config = self._load(self.config_yaml)
        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.llm.base_url, "http://ollama:11434/v1")
        self.assertEqual(config.llm.model, "qwen3:14b")
        self.assertEqual(config.llm.max_attempts, 5)
        self.assertEqual(config.agent.default_location, "Berlin")
        self.assertEqual(config.agent.discovery_count, 8)
        self.assertEqual(config.web.port, 9000)

    def test_defaults_when_sections_missing(self):
        config = self._load(yaml.dump({}))
        self.assertEqual(config.llm.base_url, DEFAULT_BASE_URL)
        self.assertEqual(config.llm.model, DEFAULT_MODEL)
        self.assertIsNone(config.llm.api_key)
        self.assertEqual(config.agent.default_location, "Remote")
        self.assertEqual(config.agent.discovery_count, 5)
        self.assertEqual(config.agent.activity_log_capacity, 50)

    def test_missing_file_uses_defaults(self):
        with patch.dict(os.environ, _CLEAN_ENV, clear=True):
            with patch("os.path.exists", return_value=False):
                config = load_config("does_not_exist.yaml")
        self.assertEqual(config.llm.model, DEFAULT_MODEL)
        self.assertEqual(config.web.port, 8080)

    def test_env_var_override_llm(self):
        config = self._load(self.config_yaml, {
            "LLM_BASE_URL": "https://api.openai.com/v1",
            "LLM_API_KEY": " sk-test ",
            "LLM_MODEL": "gpt-4o-mini"
        })
        self.assertEqual(config.llm.base_url, "https://api.openai.com/v1")
        self.assertEqual(config.llm.api_key, "sk-test")
        self.assertEqual(config.llm.model, "gpt-4o-mini")

    def test_gemini_api_key_is_fallback(self):
        config = self._load(self.config_yaml, {"GEMINI_API_KEY": "gm-key"})
        self.assertEqual(config.llm.api_key, "gm-key")

        config = self._load(self.config_yaml, {"GEMINI_API_KEY": "gm-key", "LLM_API_KEY": "llm-key"})
        self.assertEqual(config.llm.api_key, "llm-key")

    def test_env_var_override_web(self):
        config = self._load(self.config_yaml, {"WEB_HOST": "localhost", "WEB_PORT": "8181"})
        self.assertEqual(config.web.host, "localhost")
        self.assertEqual(config.web.port, 8181)

    def test_empty_sections_use_defaults(self):
        config = self._load("llm:\nagent:\nweb:\n")
        self.assertEqual(config.llm.model, DEFAULT_MODEL)
        self.assertEqual(config.agent.default_location, "Remote")
        self.assertEqual(config.web.port, 8080)

    def test_env_var_override_into_empty_web_section(self):
        config = self._load("web:\n", {"WEB_HOST": "0.0.0.0", "WEB_PORT": "8181"})
        self.assertEqual(config.web.host, "0.0.0.0")
        self.assertEqual(config.web.port, 8181)

    def test_invalid_values_raise(self):
        bad = yaml.dump({"llm": {"max_attempts": 0}})
        with self.assertRaises(ValueError):
            self._load(bad)


if __name__ == '__main__':
    unittest.main()
