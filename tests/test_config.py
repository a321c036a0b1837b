"""Tests for config loading and validation."""

import pytest

from career_tools.config import AppConfig, ExportConfig, LLMConfig, TaskConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.base_url == "https://api.groq.com/openai/v1"
        assert config.llm.model == "mixtral-8x7b-32768"
        assert config.llm.max_attempts == 1
        assert config.task("cover_letter") == TaskConfig(max_tokens=800, temperature=0.7)
        assert config.task("optimization").temperature == 0.3

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.llm.api_key_env == "GROQ_API_KEY"
        assert config.task("portfolio").max_tokens == 2000

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  model: llama-3.1-8b-instant\n  timeout: 30\n"
            "tasks:\n  interview:\n    temperature: 0.2\n"
        )
        config = load_config(yaml_path)
        assert config.llm.model == "llama-3.1-8b-instant"
        assert config.llm.timeout == 30
        assert config.task("interview").temperature == 0.2
        # Unspecified values keep their defaults
        assert config.task("interview").max_tokens == 1000
        assert config.task("resume").max_tokens == 1500

    def test_empty_yaml_gives_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_export_resolved_path(self):
        export = ExportConfig(output_dir="~/career-output")
        assert "~" not in str(export.resolved_output_dir)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"


class TestConfigValidation:
    def test_invalid_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_max_attempts(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  max_attempts: 9\n")
        with pytest.raises(ValueError, match="max_attempts"):
            load_config(yaml)

    def test_invalid_base_url(self):
        with pytest.raises(ValueError, match="base_url"):
            LLMConfig(base_url="api.groq.com")

    def test_invalid_temperature(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("tasks:\n  resume:\n    temperature: 3.5\n")
        with pytest.raises(ValueError, match="temperature"):
            load_config(yaml)

    def test_unknown_task_kind(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("tasks:\n  haiku:\n    max_tokens: 10\n")
        with pytest.raises(ValueError, match="haiku"):
            load_config(yaml)

    def test_empty_sections_give_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\ntasks:\nexport:\n")
        assert load_config(yaml_path) == AppConfig()

    def test_section_must_be_mapping(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("tasks: 5\n")
        with pytest.raises(ValueError, match="tasks"):
            load_config(yaml_path)

    def test_task_overrides_must_be_mapping(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("tasks:\n  resume: fast\n")
        with pytest.raises(ValueError, match="tasks.resume"):
            load_config(yaml_path)
