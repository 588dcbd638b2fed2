"""Application framework with colored, severity-filtered debug output and an app lifecycle."""

__version__ = "0.1.0"
__all__ = ["utility", "debug", "app"]