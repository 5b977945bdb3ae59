from __future__ import annotations

import logging

import pytest

from lib_log_bark.adapters.trainers.system import JournaldTrainer, LoggingTrainer
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack
from tests.conftest import FixedTesting


def _raised(message: str) -> RuntimeError:
    try:
        raise RuntimeError(message)
    except RuntimeError as exc:
        return exc


@pytest.fixture
def journal() -> tuple[list[dict[str, object]], object]:
    recorded: list[dict[str, object]] = []

    def _sender(**fields: object) -> None:
        recorded.append(fields)

    return recorded, _sender


def test_system_trainers_share_the_system_pack() -> None:
    assert LoggingTrainer().pack is Pack.SYSTEM
    assert JournaldTrainer(sender=lambda **_: None).pack is Pack.SYSTEM


def test_logging_trainer_is_silent_during_tests(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bark")
    LoggingTrainer().process(Level.ERROR, "Cart", "hidden", None)
    assert caplog.records == []


def test_always_active_logging_trainer_emits_during_tests(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bark")
    trainer = LoggingTrainer.always_active()
    trainer.process(Level.WARNING, "Cart", "low stock", None)

    assert trainer.skip_tests is False
    [record] = caplog.records
    assert record.name == "bark.Cart"
    assert record.bark_tag == "Cart"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "low stock"


def test_logging_trainer_maps_verbose_and_empty_tag(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(1, logger="bark")
    LoggingTrainer(test_detector=FixedTesting(False)).process(Level.VERBOSE, "", "chatty", None)

    [record] = caplog.records
    assert record.name == "bark"
    assert record.levelname == "VERBOSE"


def test_logging_trainer_attaches_exception_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bark")
    error = _raised("boom")
    LoggingTrainer(test_detector=FixedTesting(False)).process(Level.ERROR, "Cart", "failed", error)

    [record] = caplog.records
    assert record.exc_info is not None
    assert record.exc_info[1] is error


def test_logging_trainer_respects_volume(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bark")
    trainer = LoggingTrainer(Level.ERROR, test_detector=FixedTesting(False))
    trainer.process(Level.WARNING, "Cart", "skip", None)
    trainer.process(Level.CRITICAL, "Cart", "keep", None)

    assert [record.getMessage() for record in caplog.records] == ["keep"]


def test_logging_trainer_uses_custom_root_and_factory() -> None:
    requested: list[str] = []

    def _factory(name: str) -> logging.Logger:
        requested.append(name)
        return logging.getLogger(name)

    trainer = LoggingTrainer(skip_tests=False, logger_factory=_factory, root="shop")
    trainer.process(Level.INFO, "Cart", "ready", None)

    assert requested == ["shop.Cart"]
    assert trainer.logger_name("") == "shop"


def test_logging_trainer_can_share_one_logger_across_tags(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bark")
    requested: list[str] = []

    def _factory(name: str) -> logging.Logger:
        requested.append(name)
        return logging.getLogger(name)

    trainer = LoggingTrainer(skip_tests=False, logger_factory=_factory, per_tag_loggers=False)
    trainer.process(Level.INFO, "Cart", "ready", None)
    trainer.process(Level.INFO, "Order-42", "placed", None)

    assert requested == ["bark", "bark"]
    assert [(record.name, record.bark_tag) for record in caplog.records] == [
        ("bark", "Cart"),
        ("bark", "Order-42"),
    ]


def test_journald_trainer_sends_priority_and_identifier(journal) -> None:
    recorded, sender = journal
    JournaldTrainer(sender=sender, skip_tests=False).process(Level.INFO, "Cart", "ready", None)

    assert recorded == [{"MESSAGE": "ready", "PRIORITY": 6, "BARK_LEVEL": "INFO", "SYSLOG_IDENTIFIER": "Cart"}]


def test_journald_trainer_adds_traceback_for_errors(journal) -> None:
    recorded, sender = journal
    error = _raised("boom")
    JournaldTrainer(sender=sender, skip_tests=False).process(Level.CRITICAL, "Cart", "failed", error)

    [fields] = recorded
    assert fields["PRIORITY"] == 2
    assert fields["EXCEPTION"] == "RuntimeError: boom"
    assert str(fields["TRACEBACK"]).endswith("RuntimeError: boom")


def test_journald_trainer_omits_traceback_below_error(journal) -> None:
    recorded, sender = journal
    JournaldTrainer(sender=sender, skip_tests=False).process(Level.WARNING, "", "retry", ValueError("slow"))

    [fields] = recorded
    assert "TRACEBACK" not in fields
    assert "SYSLOG_IDENTIFIER" not in fields
    assert fields["EXCEPTION"] == "ValueError: slow"


def test_journald_trainer_allows_custom_identifier_field(journal) -> None:
    recorded, sender = journal
    JournaldTrainer(sender=sender, skip_tests=False, identifier_field="bark_tag").process(Level.INFO, "Cart", "x", None)

    assert recorded[0]["BARK_TAG"] == "Cart"


def test_journald_trainer_is_silent_during_tests(journal) -> None:
    recorded, sender = journal
    JournaldTrainer(sender=sender).process(Level.CRITICAL, "Cart", "hidden", None)

    assert recorded == []
