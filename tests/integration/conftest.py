"""Integration test fixtures and configuration."""

import logging

import pytest
import yaml

from movie_dashboard.config import ConfigManager
from movie_dashboard.infrastructure import Container


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by CLI logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def integration_config(tmp_path):
    """Create integration test configuration."""
    config_content = {
        "tmdb": {
            "api_key": "test-tmdb-key",
            "base_url": "https://api.example.test/3",
            "language": "en-US",
            "timeout": 10,
            "retries": 2,
            "max_pages": 2,
        },
        "cache": {
            "enabled": True,
            "genres_ttl_seconds": 600,
            "movies_ttl_seconds": 300,
            "details_ttl_seconds": 1800,
        },
        "traces": {
            "enabled": True,
            "directory": str(tmp_path / "logs"),
            "retention_days": 7,
            "webhook": {"enabled": False},
        },
        "pipeline": {
            "rolling_window": 3,
            "top_n": 10,
            "ranking_criterion": "popularity",
            "default_min_vote_count": 100,
        },
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
        "app": {
            "use_mock_data": False,
            "environment": "test",
        },
    }

    config_file = tmp_path / "integration_config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_content, f, default_flow_style=False, indent=2)

    return config_file


@pytest.fixture
def no_key_config(tmp_path):
    """Configuration without a TMDb API key."""
    config_file = tmp_path / "no_key_config.yaml"
    config_file.write_text(
        f'tmdb:\n  api_key: ""\ntraces:\n  directory: "{(tmp_path / "logs").as_posix()}"\n'
    )
    return config_file


@pytest.fixture
def integration_container(integration_config):
    """Create container serving the bundled mock catalog."""
    config_manager = ConfigManager(integration_config)
    config_manager.load_config().app.use_mock_data = True

    container = Container(config_manager)
    container.configure_default_services()
    return container
