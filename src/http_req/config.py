"""Runtime settings, filled from command-line flags."""

from dataclasses import dataclass


@dataclass
class Settings:
    """Settings for the transport, the panel server and logging."""

    # Transport
    follow_redirects: bool = True

    # Panel server
    panel_host: str = "127.0.0.1"
    panel_port: int = 8765
    open_browser: bool = True

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def verbose(cls, **overrides) -> "Settings":
        """Return settings that log dispatches at DEBUG level."""
        defaults = {"log_level": "DEBUG"}
        defaults.update(overrides)
        return cls(**defaults)
