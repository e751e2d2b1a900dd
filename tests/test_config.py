"""
Unit tests for configuration and logging setup.
"""

import logging

import pytest

from review_filter.utils.config import Config, get_config, get_filter_config
from review_filter.utils.logging import setup_logging


def test_defaults_when_file_missing(tmp_path):
    config = Config.from_yaml(tmp_path / "missing.yaml")

    assert config.get('logging.level') == 'INFO'
    assert config.get('filters.default_sort') is None
    assert config.get_int('api.port') == 8000


def test_yaml_values_override_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("filters:\n  default_sort: date-new\napi:\n  port: 9000\n")

    config = Config.from_yaml(path)

    assert config.get('filters.default_sort') == 'date-new'
    assert config.get_int('api.port') == 9000
    assert config.get('api.host') == '0.0.0.0'


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("filters:\n  default_sort: date-new\n")
    monkeypatch.setenv('FILTERS_DEFAULT_SORT', 'helpful')

    assert Config.from_yaml(path).get('filters.default_sort') == 'helpful'


def test_non_mapping_yaml_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        Config.from_yaml(path)


def test_get_int_falls_back_on_bad_value(monkeypatch):
    monkeypatch.setenv('API_PORT', 'eighty')
    assert Config().get_int('api.port', 8000) == 8000


def test_global_config_is_cached(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("filters:\n  default_sort: rating-low\n")

    config = get_config(str(path))

    assert get_config() is config
    assert get_filter_config() == {'default_sort': 'rating-low'}


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    saved = root.handlers[:]
    yield root
    for handler in root.handlers:
        if handler not in saved:
            handler.close()
    root.handlers = saved


def test_setup_logging_adds_file_handler(tmp_path, restore_root_handlers):
    log_file = tmp_path / "logs" / "app.log"
    logger = setup_logging(level='debug', log_file=str(log_file), config=Config())

    assert logger.name == 'review_filter'
    assert logger.level == logging.DEBUG
    assert len(restore_root_handlers.handlers) == 2
    logging.getLogger('review_filter.test').info("hello")
    for handler in restore_root_handlers.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()


def test_setup_logging_unknown_level_defaults_to_info(restore_root_handlers):
    logger = setup_logging(level='chatty', config=Config())

    assert logger.level == logging.INFO
    assert len(restore_root_handlers.handlers) == 1


def test_setup_logging_reads_logging_section(tmp_path, restore_root_handlers):
    log_file = tmp_path / "review_filter.log"
    config = Config({'logging': {'level': 'WARNING', 'file': str(log_file), 'format': '%(levelname)s:%(message)s'}})

    logger = setup_logging(config=config)
    logging.getLogger('review_filter.test').warning("disk low")
    for handler in restore_root_handlers.handlers:
        handler.flush()

    assert logger.level == logging.WARNING
    assert log_file.read_text() == "WARNING:disk low\n"


def test_setup_logging_level_from_environment(monkeypatch, restore_root_handlers):
    monkeypatch.setenv('LOGGING_LEVEL', 'error')

    assert setup_logging(config=Config()).level == logging.ERROR
