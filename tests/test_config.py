import pytest

from idr_numeral.config import load_config

ENV_KEYS = ("IDR_LOG_LEVEL", "IDR_DECIMALS", "IDR_PAD_ZEROS", "IDR_PARSE_MODE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = load_config()

    assert config.log_level == "INFO"
    assert config.decimals == "preserve"
    assert config.pad_zeros is False
    assert config.parse_mode == "approximate"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("IDR_LOG_LEVEL", "debug")
    monkeypatch.setenv("IDR_DECIMALS", " 2 ")
    monkeypatch.setenv("IDR_PAD_ZEROS", "yes")
    monkeypatch.setenv("IDR_PARSE_MODE", "EXACT")

    config = load_config()

    assert config.log_level == "DEBUG"
    assert config.decimals == 2
    assert config.pad_zeros is True
    assert config.parse_mode == "exact"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("IDR_DECIMALS", "  ")
    assert load_config().decimals == "preserve"


@pytest.mark.parametrize("key, value", [
    ("IDR_DECIMALS", "-1"),
    ("IDR_DECIMALS", "two"),
    ("IDR_PAD_ZEROS", "maybe"),
    ("IDR_PARSE_MODE", "fixed"),
])
def test_invalid_values_raise(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError, match=key):
        load_config()
