"""Tests for generation settings."""

import pytest

from schemagen.config import GenerationConfig, config_from_dict, config_from_yaml


def test_defaults():
    config = GenerationConfig()
    assert config.use_long_integers is False
    assert config.is_date_time_format("date-time")
    assert config.is_date_time_format("%Y")
    assert not config.is_date_time_format("email")
    assert not config.is_date_time_format(None)
    assert not config.is_date_time_format(5)


def test_from_dict():
    config = config_from_dict({"use_long_integers": True, "date_time_formats": "iso8601"})
    assert config.use_long_integers is True
    assert config.date_time_formats == ("iso8601",)


def test_from_empty_dict():
    assert config_from_dict(None) == GenerationConfig()


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="use_primitives"):
        config_from_dict({"use_primitives": True})


def test_from_yaml():
    config = config_from_yaml(
        "use_long_integers: true\n"
        "date_time_formats:\n"
        "  - date-time\n"
        "  - timestamp\n"
    )
    assert config.use_long_integers is True
    assert config.date_time_formats == ("date-time", "timestamp")
