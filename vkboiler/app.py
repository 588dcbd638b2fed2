"""Application base class and the runner that drives it."""

import abc

from vkboiler.debug import DebugAssertionError, debug_error

ABORT_EXIT_CODE = 3


class MainApplication(abc.ABC):
    """An application with a set-up phase and a run phase."""

    @abc.abstractmethod
    def initialize(self):
        """Prepare the application."""

    @abc.abstractmethod
    def run(self):
        """Run the application to completion."""


def start_application(app):
    """Initialize and run ``app``; report an error and return False if it fails."""
    try:
        app.initialize()
        app.run()
    except DebugAssertionError:
        raise
    except Exception as exc:
        debug_error("%s", str(exc))
        return False
    return True


def run_application(app_class):
    """Build and start ``app_class``, returning a process exit code."""
    app = app_class()
    try:
        return 0 if start_application(app) else 1
    except DebugAssertionError:
        return ABORT_EXIT_CODE