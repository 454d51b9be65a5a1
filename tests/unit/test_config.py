import logging

import pytest
import yaml
from pydantic import ValidationError

from crudstore.config import StoreConfig, load_config
from crudstore.logging_config import configure_logging


def test_load_config_missing_file_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "missing.yml")
    assert cfg == StoreConfig()
    assert cfg.auto_close is True
    assert cfg.file_extension == "json"


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "store_config.yml"
    path.write_text(
        "base_directory: /srv/data\n"
        "file_extension: yml\n"
        "auto_close: false\n"
        "log_level: DEBUG\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.base_directory == "/srv/data"
    assert cfg.file_extension == "yml"
    assert cfg.auto_close is False
    assert cfg.log_level == "DEBUG"


def test_load_config_empty_document(tmp_path):
    path = tmp_path / "store_config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == StoreConfig()


def test_load_config_invalid_values(tmp_path):
    path = tmp_path / "store_config.yml"
    path.write_text("backend: s3\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "store_config.yml"
    path.write_text("base_directory: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_reads_level(tmp_path, restore_root_logger):
    path = tmp_path / "store_config.yml"
    path.write_text("log_level: debug\n", encoding="utf-8")
    configure_logging(path)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_defaults_to_warning(tmp_path, restore_root_logger):
    configure_logging(tmp_path / "missing.yml")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_ignores_unknown_level(tmp_path, restore_root_logger):
    path = tmp_path / "store_config.yml"
    path.write_text("log_level: chatty\n", encoding="utf-8")
    configure_logging(path)
    assert logging.getLogger().level == logging.WARNING
