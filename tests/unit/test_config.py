"""Test configuration management."""

from pathlib import Path

import pytest

from movie_dashboard.config import Config, ConfigManager
from movie_dashboard.core.models import RankingCriterion
from movie_dashboard.utils import ConfigurationError


def test_config_manager_loads_config(config_manager):
    """Test that config manager loads configuration correctly."""
    config = config_manager.load_config()

    assert isinstance(config, Config)
    assert config.tmdb.api_key == "test-tmdb-key"
    assert config.tmdb.base_url == "https://api.example.test/3"
    assert config.tmdb.retries == 2
    assert config.tmdb.has_api_key
    assert config.pipeline.rolling_window == 3


def test_config_defaults(tmp_path):
    """Test that omitted sections get defaults."""
    config_file = tmp_path / "minimal.yaml"
    config_file.write_text('tmdb:\n  api_key: "key"\n')

    config = ConfigManager(config_file).load_config()

    assert config.tmdb.base_url == "https://api.themoviedb.org/3"
    assert config.tmdb.max_pages == 3
    assert config.cache.enabled
    assert config.cache.genres_ttl_seconds == 600
    assert config.cache.movies_ttl_seconds == 300
    assert config.traces.enabled
    assert config.traces.retention_days == 7
    assert not config.traces.webhook.enabled
    assert config.pipeline.top_n == 10
    assert config.pipeline.ranking_criterion == "popularity"
    assert config.pipeline.ranking_criterion is RankingCriterion.POPULARITY
    assert config.logging.level == "INFO"
    assert not config.app.use_mock_data


def test_config_manager_caches_config(config_manager):
    """Test that config manager caches loaded configuration."""
    config1 = config_manager.load_config()
    config2 = config_manager.get_config()

    assert config1 is config2


def test_config_manager_reload_config(config_manager):
    """Test that config manager can reload configuration."""
    config1 = config_manager.load_config()
    config2 = config_manager.reload_config()

    assert config1 is not config2
    assert config1.tmdb.api_key == config2.tmdb.api_key


def test_config_manager_missing_file():
    """Test that config manager raises error for missing file."""
    config_manager = ConfigManager(Path("nonexistent.yaml"))

    with pytest.raises(FileNotFoundError):
        config_manager.load_config()


def test_config_expands_environment_variables(tmp_path, monkeypatch):
    """Test ${VAR} expansion in configuration values."""
    monkeypatch.setenv("TMDB_API_KEY", "env-tmdb-key")
    config_file = tmp_path / "env.yaml"
    config_file.write_text('tmdb:\n  api_key: "${TMDB_API_KEY}"\n')

    config = ConfigManager(config_file).load_config()

    assert config.tmdb.api_key == "env-tmdb-key"


def test_config_unexpanded_api_key_is_not_configured(tmp_path, monkeypatch):
    """Test that a placeholder API key does not count as configured."""
    monkeypatch.delenv("MOVIE_DASHBOARD_TEST_UNSET", raising=False)
    config_file = tmp_path / "placeholder.yaml"
    config_file.write_text('tmdb:\n  api_key: "${MOVIE_DASHBOARD_TEST_UNSET}"\n')

    config = ConfigManager(config_file).load_config()

    assert not config.tmdb.has_api_key


def test_config_validation_invalid_criterion(tmp_path):
    """Test config validation with an invalid ranking criterion."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text(
        'tmdb:\n  api_key: "key"\npipeline:\n  ranking_criterion: "box_office"\n'
    )

    config_manager = ConfigManager(config_file)

    with pytest.raises(ConfigurationError, match="Configuration validation failed"):
        config_manager.load_config()


def test_config_ranking_criterion_from_yaml(tmp_path):
    """Test a ranking criterion string loads as the enum member."""
    config_file = tmp_path / "criterion.yaml"
    config_file.write_text(
        'tmdb:\n  api_key: "key"\npipeline:\n  ranking_criterion: "vote_count"\n'
    )

    config = ConfigManager(config_file).load_config()

    assert config.pipeline.ranking_criterion is RankingCriterion.VOTE_COUNT


def test_config_validation_missing_tmdb(tmp_path):
    """Test that the TMDb section is required."""
    config_file = tmp_path / "no_tmdb.yaml"
    config_file.write_text("cache:\n  enabled: false\n")

    with pytest.raises(ConfigurationError):
        ConfigManager(config_file).load_config()


def test_logging_level_is_normalized(tmp_path):
    """Test lowercase logging levels are accepted."""
    config_file = tmp_path / "logging.yaml"
    config_file.write_text('tmdb:\n  api_key: "key"\nlogging:\n  level: "debug"\n')

    config = ConfigManager(config_file).load_config()

    assert config.logging.level == "DEBUG"


def test_validate_config_file(config_manager, temp_config_file, tmp_path):
    """Test validating configuration files without loading them."""
    invalid_file = tmp_path / "invalid.yaml"
    invalid_file.write_text('tmdb:\n  api_key: "key"\npipeline:\n  top_n: 0\n')
    list_file = tmp_path / "list.yaml"
    list_file.write_text("- one\n- two\n")

    assert config_manager.validate_config_file(temp_config_file)
    assert not config_manager.validate_config_file(invalid_file)
    assert not config_manager.validate_config_file(list_file)


def test_create_default_config(tmp_path):
    """Test creating default configuration file."""
    output_path = tmp_path / "default_config.yaml"

    ConfigManager.create_default_config(output_path)

    assert output_path.exists()

    # Should be able to load the created config
    config_manager = ConfigManager(output_path)
    config = config_manager.load_config()
    assert isinstance(config, Config)
    assert config.pipeline.rolling_window == 3
