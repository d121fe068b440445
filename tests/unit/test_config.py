"""Tests for configuration loading."""

from unittest.mock import patch

from contracting.config import ServiceConfig, load_config, reload_config


class TestConfig:

    def test_defaults(self):
        config = ServiceConfig()
        assert config.server.port == 4000
        assert config.store.backend == "memory"
        assert config.store.seed_demo_data is True
        assert config.logging.level == "INFO"

    def test_missing_file_gives_defaults(self):
        config = load_config("/nonexistent.yml")
        assert config.server.cors_origins == ["*"]

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "contracting.yml"
        path.write_text("store:\n  seed_demo_data: false\nserver:\n  port: 8080\n")
        config = load_config(str(path))
        assert config.store.seed_demo_data is False
        assert config.server.port == 8080

    @patch.dict("os.environ", {"CONFIG__STORE__SEED_DEMO_DATA": "false"})
    def test_env_override(self):
        config = load_config("/nonexistent.yml")
        assert config.store.seed_demo_data is False

    @patch.dict("os.environ", {"PORT": "5050", "LOG_LEVEL": "debug"})
    def test_port_and_log_level(self):
        config = load_config("/nonexistent.yml")
        assert config.server.port == 5050
        assert config.logging.level == "debug"

    def test_reload(self, tmp_path):
        path = tmp_path / "c.yml"
        path.write_text("logging:\n  log_requests: false\n")
        assert reload_config(str(path)).logging.log_requests is False
        reload_config("/nonexistent.yml")
