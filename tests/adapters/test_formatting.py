from __future__ import annotations

from lib_log_bark.adapters.formatting import COLORED, PLAIN, LineFormatter, format_traceback
from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level


def _raised(error: BaseException) -> BaseException:
    try:
        raise error
    except BaseException as exc:  # noqa: BLE001
        return exc


def test_headline_includes_timestamp_label_tag_and_message(fixed_clock) -> None:
    formatter = LineFormatter(clock=fixed_clock)
    line = formatter.headline(LogEvent(Level.INFO, "TestClass", "hello"))
    assert line.plain == "14:05:09.123 [INFO] - TestClass: hello"


def test_timestamp_can_be_disabled(fixed_clock) -> None:
    formatter = LineFormatter(show_timestamp=False, clock=fixed_clock)
    assert formatter.headline(LogEvent(Level.DEBUG, "", "")).plain == "[DEBUG] - : "


def test_error_line_follows_headline_below_error_level(fixed_clock) -> None:
    formatter = LineFormatter(show_timestamp=False, clock=fixed_clock)
    lines = formatter.lines(LogEvent(Level.WARNING, "Cart", "retrying", ValueError("timeout")))
    assert [line.plain for line in lines] == ["[WARNING] - Cart: retrying", "Exception: timeout"]


def test_error_level_adds_traceback() -> None:
    formatter = LineFormatter(show_timestamp=False)
    error = _raised(RuntimeError("broken"))
    lines = formatter.lines(LogEvent(Level.ERROR, "Cart", "failed", error))
    assert len(lines) == 3
    assert lines[1].plain == "Exception: broken"
    assert lines[2].plain.startswith("Traceback (most recent call last):")
    assert lines[2].plain.endswith("RuntimeError: broken")


def test_format_traceback_has_no_trailing_newline() -> None:
    assert not format_traceback(_raised(KeyError("k"))).endswith("\n")


def test_colored_decorations_style_level_and_error() -> None:
    formatter = LineFormatter(COLORED, show_timestamp=False)
    lines = formatter.lines(LogEvent(Level.WARNING, "Cart", "retrying", ValueError("timeout")))
    assert formatter.colored is True
    assert lines[0].plain == "[WARNING] - Cart: retrying"
    assert any(span.style == "yellow" for span in lines[0].spans)
    assert lines[1].style == "red"


def test_plain_decorations_carry_no_style() -> None:
    formatter = LineFormatter(PLAIN, show_timestamp=False)
    line = formatter.headline(LogEvent(Level.ERROR, "Cart", "x"))
    assert formatter.colored is False
    assert line.spans == []


def test_formatted_lines_render_on_a_rich_console(record_console) -> None:
    formatter = LineFormatter(COLORED, show_timestamp=False)
    for line in formatter.lines(LogEvent(Level.INFO, "Cart", "ready")):
        record_console.print(line)
    assert record_console.export_text() == "[INFO] - Cart: ready\n"


def test_plain_lines_match_rendered_lines_and_keep_control_characters(fixed_clock) -> None:
    formatter = LineFormatter(clock=fixed_clock)
    error = _raised(RuntimeError("boom"))

    lines = formatter.plain_lines(LogEvent(Level.ERROR, "Cart", "a\tb\rc\x0cd", error))

    assert lines[0] == "14:05:09.123 [ERROR] - Cart: a\tb\rc\x0cd"
    assert lines[1] == "Exception: boom"
    assert lines[2] == format_traceback(error)
