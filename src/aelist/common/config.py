"""Configuration management for aelist."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from aelist.common.errors import ConfigurationError
from aelist.common.logging import parse_level
from aelist.settings import DEFAULT_NPROMPT, MAX_NPROMPT, DisplayMode

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES


@dataclass
class LauncherConfig:
    """Launcher defaults that command-line flags may override."""

    mode: str = DisplayMode.SHORT.value
    nprompt: str | int = DEFAULT_NPROMPT
    skip_banner: bool = False
    include_env_paths: bool = False
    path_env_var: str = "PATH"

    @classmethod
    def from_env(cls) -> LauncherConfig:
        """Load configuration from environment variables.

        Expected variables:
            AELIST_MODE: Default display mode (short, line, long or random)
            AELIST_NPROMPT: Default display cap
            AELIST_SKIP_BANNER: Skip the loading banner (1/true/yes/on)
            AELIST_INCLUDE_PATH: Always append the path variable to explicit paths
            AELIST_PATH_VAR: Name of the colon-delimited path variable (default: PATH)

        Returns:
            LauncherConfig instance
        """
        return cls(
            mode=os.getenv("AELIST_MODE") or DisplayMode.SHORT.value,
            nprompt=os.getenv("AELIST_NPROMPT") or DEFAULT_NPROMPT,
            skip_banner=_env_flag("AELIST_SKIP_BANNER"),
            include_env_paths=_env_flag("AELIST_INCLUDE_PATH"),
            path_env_var=os.getenv("AELIST_PATH_VAR") or "PATH",
        )

    def validate(self) -> dict[str, str]:
        """Validate configuration.

        Returns:
            Dict of field names to error messages (empty if valid)
        """
        errors = {}
        valid_modes = [mode.value for mode in DisplayMode] + ["random"]
        if self.mode not in valid_modes:
            errors["mode"] = f"AELIST_MODE must be one of {', '.join(valid_modes)}, got {self.mode!r}"
        try:
            nprompt = int(str(self.nprompt).strip())
        except ValueError:
            errors["nprompt"] = f"Failed convert {self.nprompt!r} to num"
        else:
            if not 1 <= nprompt <= MAX_NPROMPT:
                errors["nprompt"] = f"AELIST_NPROMPT must be between 1 and {MAX_NPROMPT}, got {nprompt}"
        if not self.path_env_var:
            errors["path_env_var"] = "AELIST_PATH_VAR must not be empty"
        return errors

    @property
    def nprompt_value(self) -> int:
        """Display cap as an integer. Only meaningful after validate() passed."""
        return int(str(self.nprompt).strip())


class AppConfig:
    """Main application configuration loader."""

    def __init__(self, env_file: Path | None = None, load_env: bool = True):
        """Initialize configuration from environment.

        Args:
            env_file: Optional path to .env file. If not provided,
                     looks for .env in current directory or ~/.aelist.env
            load_env: Whether to load from .env files (default True). Set False in tests.
        """
        if load_env:
            if env_file and env_file.exists():
                load_dotenv(env_file)
            else:
                for default in [
                    Path(".env"),
                    Path.home() / ".aelist.env",
                ]:
                    if default.exists():
                        load_dotenv(default)
                        break

        self.launcher = LauncherConfig.from_env()

        log_file = os.getenv("AELIST_LOG_FILE")
        self.log_file = Path(log_file).expanduser() if log_file else None
        self.log_level = os.getenv("LOG_LEVEL", "WARNING")

    def validate(self) -> dict[str, str]:
        """Validate the launcher section and the logging settings.

        Returns:
            Dict of qualified field names to error messages (empty if valid)
        """
        errors = {f"launcher.{field}": error_msg for field, error_msg in self.launcher.validate().items()}
        try:
            parse_level(self.log_level)
        except ConfigurationError:
            errors["log_level"] = f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {self.log_level!r}"
        return errors

    def require_valid(self) -> None:
        """Require the configuration to be valid.

        Raises:
            ConfigurationError: If any field is invalid

        Example:
            >>> config = AppConfig()
            >>> config.require_valid()  # Raises if invalid
        """
        errors = self.validate()
        if errors:
            all_errors = [f"{field}: {error_msg}" for field, error_msg in errors.items()]
            raise ConfigurationError("Configuration validation failed:\n  - " + "\n  - ".join(all_errors))
