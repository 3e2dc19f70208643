"""
Configuration Management Layer for the CLI

Provides centralized configuration with support for:
- Environment variables (CBCT_* prefix)
- Config files (~/.cbct_preset_selector.json or one passed with --config)
- Command-line overrides
- Validated defaults

Configuration priority (highest to lowest):
1. Command-line overrides
2. Config file given with --config
3. User config file
4. Environment variables
5. Hardcoded defaults
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from cbct_preset_selector import APP_NAME
from cbct_preset_selector.cli.platform_support import default_pause_on_exit, local_data_dir


ENV_PREFIX = "CBCT_"
USER_CONFIG_NAME = f".{APP_NAME}.json"


class AppConfig(BaseModel):
    """
    Central configuration for the preset selector.

    Paths are resolved to absolute paths during validation. Directories are
    not created here; the data directory is created on demand by the CLI.
    """

    # Data location
    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory searched for the preset table when no CSV path is given "
                    "(default: per-user local data directory)"
    )
    data_file_name: str = Field(
        default="data.csv",
        min_length=1,
        description="File name of the preset table inside data_dir"
    )

    # Table format
    delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field separator of the preset table"
    )
    encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding of the preset table"
    )

    # Behavior settings
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for rotating log files (disabled when unset)"
    )
    verbose: bool = Field(
        default=False,
        description="Enable debug logging output"
    )
    pause_on_exit: bool = Field(
        default_factory=default_pause_on_exit,
        description="Wait for a keypress before exiting after an error"
    )

    model_config = {
        "validate_assignment": True,
    }

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def resolve_path(cls, v) -> Optional[Path]:
        """
        Resolve paths to absolute paths.
        Relative paths are resolved relative to current working directory.
        """
        if v is None:
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        return path.resolve()

    @property
    def resolved_data_dir(self) -> Path:
        """data_dir, falling back to the platform local data directory."""
        return self.data_dir or local_data_dir(APP_NAME)

    @property
    def default_data_file(self) -> Path:
        return self.resolved_data_dir / self.data_file_name

    @classmethod
    def env_values(cls, prefix: str = ENV_PREFIX) -> Dict[str, Any]:
        """
        Collect raw field values from environment variables.

        Environment variable format: {prefix}{FIELD_NAME}
        Example: CBCT_VERBOSE=true, CBCT_DATA_DIR=/srv/presets

        Values are left as strings; pydantic coerces them on validation.
        """
        values = {}
        for field_name in cls.model_fields.keys():
            env_value = os.getenv(f"{prefix}{field_name.upper()}")
            if env_value is not None:
                values[field_name] = env_value
        return values

    @classmethod
    def file_values(cls, config_file: Path) -> Dict[str, Any]:
        """
        Read field values from a JSON config file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        config_file = Path(config_file)

        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = json.load(f)

        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file must contain a JSON object: {config_file}")

        # Drop comments or metadata fields that aren't part of the model
        return {k: v for k, v in config_dict.items() if k in cls.model_fields}

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "AppConfig":
        return cls(**cls.env_values(prefix))

    @classmethod
    def from_file(cls, config_file: Path) -> "AppConfig":
        return cls(**cls.file_values(config_file))

    def save(self, config_file: Path, pretty: bool = True) -> None:
        """
        Save current configuration to a JSON file.

        Args:
            config_file: Path where to save configuration
            pretty: If True, format JSON with indentation
        """
        config_file = Path(config_file)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json")

        with open(config_file, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(config_dict, f, indent=2, sort_keys=False)
                f.write("\n")
            else:
                json.dump(config_dict, f)

    def merge_with(self, **overrides) -> "AppConfig":
        """Create a new config with the given field overrides applied."""
        config_dict = self.model_dump()
        config_dict.update(overrides)
        return AppConfig(**config_dict)


def user_config_path() -> Path:
    return Path.home() / USER_CONFIG_NAME


def load_config_with_precedence(
    config_file: Optional[Path] = None,
    check_env: bool = True,
    check_user_config: bool = True,
    **overrides
) -> AppConfig:
    """
    Load configuration with proper precedence handling.

    Precedence (highest to lowest):
    1. Explicit overrides (**overrides)
    2. Specified config file (config_file parameter)
    3. User config (~/.cbct_preset_selector.json)
    4. Environment variables (CBCT_*)
    5. Defaults

    Args:
        config_file: Explicit config file path
        check_env: Whether to load from environment variables
        check_user_config: Whether to check the user home directory for config
        **overrides: Direct field overrides (highest priority)

    Returns:
        AppConfig instance with merged configuration

    Raises:
        FileNotFoundError: If config_file is given but missing
        ValueError: If a config source holds invalid JSON or invalid values
    """
    values: Dict[str, Any] = {}

    if check_env:
        values.update(AppConfig.env_values())

    if check_user_config:
        user_config = user_config_path()
        if user_config.exists():
            values.update(AppConfig.file_values(user_config))

    if config_file is not None:
        values.update(AppConfig.file_values(config_file))

    values.update({k: v for k, v in overrides.items() if v is not None})

    return AppConfig(**values)
