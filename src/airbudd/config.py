"""
Configuration module for AirBudd.

Handles environment variables and default rendering settings.

Defaults are an immutable snapshot. Set them once at application startup
with `update_config`, and derive per-form variations with
`FormDefaults.derive`.
"""

import dataclasses
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from airbudd.errors import ConfigurationError

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass(frozen=True)
class FormDefaults:
    """Default rendering settings for AirBudd form builders."""

    # Label settings
    required_signifier: str = "(required)"
    label_suffix: str = ":"
    capitalize_errors: bool = True

    # Button/link icon settings
    icon_path: str = "/images/icons"
    icon_extension: str = "png"
    buttons_class: str = "buttons"

    def derive(self, **overrides) -> "FormDefaults":
        """
        Return a copy with some settings overridden.

        Used for per-form overrides; the receiver is left untouched.

        Raises:
            ConfigurationError: If a name is not a known setting.
        """
        _check_names(overrides)
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_env(cls) -> "FormDefaults":
        """
        Create defaults from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            required_signifier=os.getenv("AIRBUDD_REQUIRED_SIGNIFIER", _defaults.required_signifier),
            label_suffix=os.getenv("AIRBUDD_LABEL_SUFFIX", _defaults.label_suffix),
            capitalize_errors=_env_bool("AIRBUDD_CAPITALIZE_ERRORS", _defaults.capitalize_errors),
            icon_path=os.getenv("AIRBUDD_ICON_PATH", _defaults.icon_path),
            icon_extension=os.getenv("AIRBUDD_ICON_EXTENSION", _defaults.icon_extension),
            buttons_class=os.getenv("AIRBUDD_BUTTONS_CLASS", _defaults.buttons_class),
        )


def _check_names(settings: dict) -> None:
    known = {f.name for f in dataclasses.fields(FormDefaults)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown form default(s): {', '.join(unknown)}. "
            f"Known: {', '.join(sorted(known))}"
        )


config = FormDefaults.from_env()


def get_config() -> FormDefaults:
    """Get the current process-wide defaults."""
    return config


def update_config(**kwargs) -> FormDefaults:
    """
    Replace the process-wide defaults.

    Meant for application startup. Builders already constructed keep the
    snapshot they were given.
    """
    global config
    config = config.derive(**kwargs)
    return config


def reset_config() -> FormDefaults:
    """Reload the process-wide defaults from the environment."""
    global config
    config = FormDefaults.from_env()
    return config
