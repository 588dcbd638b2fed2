import inspect

import pytest

from vkboiler.debug import (
    Debug,
    DebugAssertionError,
    DebugType,
    SeverityLevel,
    debug_assert,
    debug_critical,
    debug_error,
    debug_info,
    debug_log,
    debug_warning,
    debug_warning_message,
    get_color_code,
    get_tag_string,
)


@pytest.fixture(autouse=True)
def _reset_severity():
    previous = Debug.get_severity_level()
    Debug.set_severity_level(SeverityLevel.ALL)
    yield
    Debug.set_severity_level(previous)


def test_color_codes_from_table():
    assert get_color_code(DebugType.INFO) == "\033[094m"
    assert get_color_code(DebugType.WARNING) == "\033[093m"
    assert get_color_code(DebugType.NONE) == "\033[0m"


def test_tag_strings():
    assert get_tag_string(DebugType.ASSERT) == "ASSERTION ERROR"
    assert get_tag_string(DebugType.TRACE) == "TRACE"
    assert get_tag_string(DebugType.NONE) == ""


def test_set_and_get_severity():
    Debug.set_severity_level(SeverityLevel.WARNING)
    assert Debug.get_severity_level() is SeverityLevel.WARNING


def test_is_severity_enabled_threshold():
    Debug.set_severity_level(SeverityLevel.WARNING)
    assert Debug.is_severity_enabled(SeverityLevel.ERROR)
    assert Debug.is_severity_enabled(SeverityLevel.WARNING)
    assert not Debug.is_severity_enabled(SeverityLevel.INFO)


def test_should_print_unknown_type_needs_all():
    Debug.set_severity_level(SeverityLevel.LOG)
    assert not Debug.should_print_message(DebugType.NONE)
    assert Debug.should_print_message(DebugType.LOG)


def test_print_message_format(capsys):
    Debug.print_message(DebugType.INFO, "hello %d", 5)
    assert capsys.readouterr().out == "\033[094m[INFO] hello 5\033[0m\n"


def test_print_qualified_message_format(capsys):
    Debug.print_qualified_message(DebugType.ERROR, "a.py", 7, "bad %s", "thing")
    assert capsys.readouterr().out == "\033[091m[ERROR] bad thing\n[a.py:7]\033[0m\n"


def test_message_is_truncated(capsys):
    debug_log("%s", "x" * 5000)
    out = capsys.readouterr().out
    body = out[len("\033[0m[LOG] "):-len("\033[0m\n")]
    assert body == "x" * 4095


def test_severity_filters_output(capsys):
    Debug.set_severity_level(SeverityLevel.WARNING)
    debug_info("hidden")
    debug_warning_message("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[WARNING] shown" in out


def test_none_severity_silences_everything(capsys):
    Debug.set_severity_level(SeverityLevel.NONE)
    debug_critical("quiet")
    assert capsys.readouterr().out == ""


def test_qualified_helpers_report_caller_location(capsys):
    line = inspect.currentframe().f_lineno + 1
    debug_error("oops")
    out = capsys.readouterr().out
    assert f"\n[{__file__}:{line}]" in out


def test_debug_assert_true_prints_nothing(capsys):
    debug_assert(True, "never")
    assert capsys.readouterr().out == ""


def test_debug_assert_false_raises_and_reports(capsys):
    with pytest.raises(DebugAssertionError, match="boom 3"):
        debug_assert(1 > 2, "boom %d", 3)
    out = capsys.readouterr().out
    assert out.startswith("\033[031m[ASSERTION ERROR] boom 3\n[")