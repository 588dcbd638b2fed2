"""Coloured, severity-filtered diagnostic output."""

import enum
import inspect

from vkboiler.utility import cformat, emit, printf

_RESET = "\033[0m"
_BUFFER_LIMIT = 4095


class SeverityLevel(enum.IntEnum):
    """How much diagnostic output is let through; higher lets more through."""

    NONE = 0
    CRITICAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    TRACE = 5
    DISPLAY = 6
    LOG = 7
    ALL = 8


class DebugType(enum.IntEnum):
    """Kind of a diagnostic message."""

    NONE = 0
    ASSERT = 1
    CRITICAL = 2
    DISPLAY = 3
    ERROR = 4
    INFO = 5
    LOG = 6
    TRACE = 7
    WARNING = 8


class DebugAssertionError(AssertionError):
    """Raised when a debug assertion fails; ends the application."""


_COLOR_CODES = {
    DebugType.ASSERT: "\033[031m",
    DebugType.CRITICAL: "\033[031m",
    DebugType.DISPLAY: "\033[092m",
    DebugType.ERROR: "\033[091m",
    DebugType.INFO: "\033[094m",
    DebugType.LOG: "\033[0m",
    DebugType.TRACE: "\033[095m",
    DebugType.WARNING: "\033[093m",
}

_TAGS = {
    DebugType.ASSERT: "ASSERTION ERROR",
    DebugType.CRITICAL: "CRITICAL",
    DebugType.DISPLAY: "DISPLAY",
    DebugType.ERROR: "ERROR",
    DebugType.INFO: "INFO",
    DebugType.LOG: "LOG",
    DebugType.TRACE: "TRACE",
    DebugType.WARNING: "WARNING",
}

_REQUIRED_SEVERITY = {
    DebugType.CRITICAL: SeverityLevel.CRITICAL,
    DebugType.ASSERT: SeverityLevel.CRITICAL,
    DebugType.ERROR: SeverityLevel.ERROR,
    DebugType.WARNING: SeverityLevel.WARNING,
    DebugType.INFO: SeverityLevel.INFO,
    DebugType.TRACE: SeverityLevel.TRACE,
    DebugType.DISPLAY: SeverityLevel.DISPLAY,
    DebugType.LOG: SeverityLevel.LOG,
}


def get_color_code(debug_type):
    """Return the ANSI colour escape used for ``debug_type``."""
    return _COLOR_CODES.get(debug_type, _RESET)


def get_tag_string(debug_type):
    """Return the bracketed tag text used for ``debug_type``."""
    return _TAGS.get(debug_type, "")


class Debug:
    """Process-wide diagnostic printer with a configurable severity threshold."""

    _severity = SeverityLevel.ALL if __debug__ else SeverityLevel.ERROR

    @classmethod
    def set_severity_level(cls, severity):
        cls._severity = SeverityLevel(severity)

    @classmethod
    def get_severity_level(cls):
        return cls._severity

    @classmethod
    def is_severity_enabled(cls, severity):
        return cls._severity >= severity

    @classmethod
    def should_print_message(cls, debug_type):
        required = _REQUIRED_SEVERITY.get(debug_type, SeverityLevel.ALL)
        return cls.is_severity_enabled(required)

    @classmethod
    def print_message(cls, debug_type, fmt, *args):
        """Print a tagged, coloured message if its severity is enabled."""
        if not __debug__ or not cls.should_print_message(debug_type):
            return
        color = get_color_code(debug_type)
        _pre_print(color, get_tag_string(debug_type))
        _print_formatted(fmt, args)
        _post_print()

    @classmethod
    def print_qualified_message(cls, debug_type, file, line, fmt, *args):
        """Print a message followed by the source location it came from."""
        if not __debug__ or not cls.should_print_message(debug_type):
            return
        color = get_color_code(debug_type)
        _pre_print(color, get_tag_string(debug_type))
        _print_formatted(fmt, args)
        printf("\n[%s:%d]", file, line)
        _post_print()


def _pre_print(color, tag):
    emit(color)
    printf("[%s] ", tag)


def _print_formatted(fmt, args):
    emit(cformat(fmt, *args)[:_BUFFER_LIMIT])


def _post_print():
    emit(_RESET)
    emit("\n")


def _caller_location(depth=2):
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def debug_assert(condition, fmt, *args):
    """Report and raise :class:`DebugAssertionError` when ``condition`` is false."""
    if not __debug__ or condition:
        return
    file, line = _caller_location()
    Debug.print_qualified_message(DebugType.ASSERT, file, line, fmt, *args)
    raise DebugAssertionError(cformat(fmt, *args))


def debug_critical(fmt, *args):
    file, line = _caller_location()
    Debug.print_qualified_message(DebugType.CRITICAL, file, line, fmt, *args)


def debug_critical_message(fmt, *args):
    Debug.print_message(DebugType.CRITICAL, fmt, *args)


def debug_display(fmt, *args):
    Debug.print_message(DebugType.DISPLAY, fmt, *args)


def debug_error(fmt, *args):
    file, line = _caller_location()
    Debug.print_qualified_message(DebugType.ERROR, file, line, fmt, *args)


def debug_error_message(fmt, *args):
    Debug.print_message(DebugType.ERROR, fmt, *args)


def debug_info(fmt, *args):
    Debug.print_message(DebugType.INFO, fmt, *args)


def debug_log(fmt, *args):
    Debug.print_message(DebugType.LOG, fmt, *args)


def debug_trace(fmt, *args):
    Debug.print_message(DebugType.TRACE, fmt, *args)


def debug_warning(fmt, *args):
    file, line = _caller_location()
    Debug.print_qualified_message(DebugType.WARNING, file, line, fmt, *args)


def debug_warning_message(fmt, *args):
    Debug.print_message(DebugType.WARNING, fmt, *args)