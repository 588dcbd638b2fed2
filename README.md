# vkboiler

A small framework for starting an application. It has no dependencies outside the standard library and has two parts:

- **Debug output** (`vkboiler.debug`). Each message carries a tag and an ANSI colour. Messages are filtered by a global severity level.
- **An application lifecycle** (`vkboiler.app`). You subclass `MainApplication` and run it with `start_application` or `run_application`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Debug output

```python
from vkboiler.debug import Debug, SeverityLevel, debug_info, debug_error, debug_assert

Debug.set_severity_level(SeverityLevel.WARNING)
debug_info("not shown at this level")
debug_error("failed to load %s", "texture.png")   # tagged [ERROR], followed by [file:line]
debug_assert(1 + 1 == 2, "arithmetic is broken")
```

Every message is written to standard output in this form: the type's colour code, then `[TAG] `, then the formatted text, then a reset code and a newline. Formatting uses printf-style `%` substitution, and the formatted text is cut off at 4095 characters.

Some helpers also append the caller's location as `[file:line]`:

- With location: `debug_critical`, `debug_error`, `debug_warning`, `debug_assert`.
- Without location: `debug_critical_message`, `debug_error_message`, `debug_warning_message`, `debug_info`, `debug_display`, `debug_trace`, `debug_log`.

`debug_assert(condition, fmt, *args)` does nothing when the condition is true. When it is false, it prints an `ASSERTION ERROR` message and raises `DebugAssertionError`, which is a subclass of `AssertionError`.

### Severity levels

The severity levels, from least to most verbose, are:

`NONE`, `CRITICAL`, `ERROR`, `WARNING`, `INFO`, `TRACE`, `DISPLAY`, `LOG`, `ALL`

A message type is printed when the current level is at or above the level it needs:

| Message types | Level needed |
|---|---|
| critical and assertion | `CRITICAL` |
| error | `ERROR` |
| warning | `WARNING` |
| info | `INFO` |
| trace | `TRACE` |
| display | `DISPLAY` |
| log | `LOG` |

The default level is `ALL`. When Python runs with `-O`, the default level is `ERROR`, nothing is printed, and `debug_assert` does not check its condition.

The `Debug` class has these methods for working with the level:

- `Debug.set_severity_level`
- `Debug.get_severity_level`
- `Debug.is_severity_enabled`
- `Debug.should_print_message`

It also has `Debug.print_message` and `Debug.print_qualified_message`, which print a message directly.

`get_color_code(debug_type)` and `get_tag_string(debug_type)` return the colour code and the tag text used for each `DebugType`.

## Formatting helpers

`vkboiler.utility` has three helpers:

- `emit(message)` writes a string to standard output without adding a newline.
- `printf(fmt, *args)` formats the string printf-style and writes it.
- `cformat(fmt, *args)` formats the string printf-style and returns it.

## Writing an application

```python
from vkboiler.app import MainApplication, run_application

class MyApp(MainApplication):
    def initialize(self):
        ...

    def run(self):
        ...

raise SystemExit(run_application(MyApp))
```

`start_application(app)` calls `initialize()` and then `run()`, and returns `True` on success.

- If either call raises an ordinary exception, the error is reported through `debug_error` and the function returns `False`.
- A `DebugAssertionError` is not caught here; it propagates to the caller.

`run_application(app_class)` creates the app with no arguments and starts it. It returns an exit code:

| Outcome | Exit code |
|---|---|
| Success | `0` |
| Failure | `1` |
| A failed debug assertion | `3` (`ABORT_EXIT_CODE`) |

## What this package does not do

- It has no window or other graphical output; all output goes to standard output.
- It installs no commands. To run an application, call `run_application` from your own code.