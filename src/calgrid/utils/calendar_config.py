"""
Calendar configuration settings.

Defaults applied when a grid build does not say otherwise. Values can be
set through environment variables without code changes.
"""
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict

from calgrid.models.week import WeekMode

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _mode_from_environment(raw: str) -> WeekMode:
    try:
        return WeekMode(raw.strip().lower())
    except ValueError:
        logger.warning(f"Ignoring invalid CALGRID_WEEK_MODE={raw!r}, using '{WeekMode.SUN.value}'")
        return WeekMode.SUN


@dataclass
class CalendarConfig:
    """Configuration for calendar grid generation."""

    default_mode: WeekMode = WeekMode.SUN  # Week-start mode when none is requested
    legacy_padding: bool = False  # Reproduce the original padding rows (current-month days, flags off)

    def __post_init__(self):
        try:
            self.default_mode = WeekMode(self.default_mode)
        except ValueError as e:
            raise ValueError(
                f"default_mode must be one of: {', '.join(m.value for m in WeekMode)}, "
                f"got {self.default_mode!r}"
            ) from e
        self.legacy_padding = bool(self.legacy_padding)

    @classmethod
    def from_environment(cls) -> 'CalendarConfig':
        """
        Create configuration from environment variables with fallback to defaults.

        Environment variables:
        - CALGRID_WEEK_MODE ("sun" or "mon")
        - CALGRID_LEGACY_PADDING ("1", "true", "yes", "on" enable it)
        """
        return cls(
            default_mode=_mode_from_environment(os.getenv('CALGRID_WEEK_MODE', WeekMode.SUN.value)),
            legacy_padding=os.getenv('CALGRID_LEGACY_PADDING', '').strip().lower() in _TRUTHY,
        )


# Global configuration instance
calendar_config = CalendarConfig.from_environment()


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration instance."""
    return calendar_config


def update_config_from_dict(config_dict: Dict[str, Any]) -> None:
    """
    Update configuration from a dictionary (useful for testing).

    Args:
        config_dict: Dictionary with configuration values
    """
    global calendar_config

    current_values = {field.name: getattr(calendar_config, field.name) for field in fields(calendar_config)}
    current_values.update(config_dict)

    calendar_config = CalendarConfig(**current_values)


def reset_config() -> None:
    """Reload the global configuration from the environment."""
    global calendar_config
    calendar_config = CalendarConfig.from_environment()
