from __future__ import annotations

import pytest

from lib_log_bark.runtime._settings import BarkSettings, parse_bool, parse_max_length


def test_defaults_without_environment() -> None:
    assert BarkSettings.from_env({}) == BarkSettings(muted=False, tag=None, auto_tag=True, tag_max_length=None)


def test_environment_values_are_parsed() -> None:
    settings = BarkSettings.from_env(
        {"BARK_MUTED": "yes", "BARK_TAG": "Checkout", "BARK_AUTO_TAG": "off", "BARK_TAG_MAX_LENGTH": " 23 "}
    )
    assert settings == BarkSettings(muted=True, tag="Checkout", auto_tag=False, tag_max_length=23)


def test_blank_values_are_ignored() -> None:
    assert BarkSettings.from_env({"BARK_MUTED": " ", "BARK_TAG": "", "BARK_TAG_MAX_LENGTH": ""}) == BarkSettings()


def test_explicit_overrides_beat_environment() -> None:
    settings = BarkSettings.from_env({"BARK_TAG": "FromEnv", "BARK_MUTED": "1"}, tag="Explicit", muted=False)
    assert settings.tag == "Explicit"
    assert settings.muted is False


def test_process_environment_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BARK_TAG", "Process")
    assert BarkSettings.from_env().tag == "Process"


@pytest.mark.parametrize("raw", ["1", "TRUE", "Yes", " on "])
def test_truthy_flags(raw: str) -> None:
    assert parse_bool("FLAG", raw) is True


@pytest.mark.parametrize("raw", ["0", "False", "NO", "off"])
def test_falsy_flags(raw: str) -> None:
    assert parse_bool("FLAG", raw) is False


def test_invalid_flag_is_rejected() -> None:
    with pytest.raises(ValueError, match="BARK_MUTED must be one of"):
        BarkSettings.from_env({"BARK_MUTED": "sometimes"})


@pytest.mark.parametrize(("raw", "message"), [("abc", "must be an integer"), ("0", "must be positive"), ("-3", "must be positive")])
def test_invalid_max_length_is_rejected(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_max_length("BARK_TAG_MAX_LENGTH", raw)
