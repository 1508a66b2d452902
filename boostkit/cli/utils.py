"""
Shared utilities for the CLI.

Merges install settings from command-line flags, GitHub Actions inputs,
an optional YAML configuration file and built-in defaults.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from boostkit.ci.actions import ActionsHost
from boostkit.core.directory import get_default_root_dir
from boostkit.core.exceptions import ValidationError
from boostkit.install.installer import INSTALL_METHODS, InstallMethod
from boostkit.install.manifest import DEFAULT_MANIFEST_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "boostkit.yaml"

# setting name -> action input name
ACTION_INPUTS = {
    "boost_version": "boost_version",
    "toolset": "toolset",
    "platform_version": "platform_version",
    "root_dir": "boost_install_dir",
    "manifest_url": "manifest_url",
    "method": "method",
}


@dataclass
class InstallSettings:
    """Fully merged settings for one install run."""

    boost_version: str
    toolset: str
    platform_version: str
    root_dir: Path
    manifest_url: str
    method: InstallMethod


# ============================================================================
# Configuration Management
# ============================================================================


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ValidationError: If the file is required and missing, unreadable,
            not valid YAML, or not a mapping

    Example:
        >>> config = load_yaml_config(Path("boostkit.yaml"))
        >>> config.get("boost_version")
        '1.82.0'
    """
    if not config_file.exists():
        if required:
            raise ValidationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ValidationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ValidationError(f"Cannot read {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ValidationError(f"Configuration in {config_file} must be a mapping")
    return config


def find_config_file(config_path: Optional[Path]) -> Optional[Path]:
    """Return the explicit config path, or ./boostkit.yaml if it exists."""
    if config_path:
        return Path(config_path)
    default_config = Path.cwd() / DEFAULT_CONFIG_FILE
    return default_config if default_config.exists() else None


def _pick(name: str, args: Any, host: ActionsHost, config: Dict[str, Any]) -> str:
    """First non-empty value of a setting, in precedence order."""
    value = getattr(args, name, None)
    if value:
        return str(value)

    value = host.get_input(ACTION_INPUTS[name])
    if value:
        return value

    value = config.get(name)
    if value is None or value == "":
        return ""
    if not isinstance(value, str):
        # YAML reads 1.80 as the float 1.8
        raise ValidationError(
            f"'{name}' in the configuration file must be a string, "
            f"got {type(value).__name__} {value!r}; quote the value"
        )
    return value.strip()


def resolve_settings(
    args: Any, host: ActionsHost, config: Optional[Dict[str, Any]] = None
) -> InstallSettings:
    """
    Merge install settings.

    Precedence, highest first: command-line flags, action inputs,
    configuration file, defaults.

    Args:
        args: Parsed command-line arguments
        host: Actions host to read inputs from
        config: Loaded configuration file contents

    Returns:
        InstallSettings

    Raises:
        ValidationError: If boost_version is empty or method is unknown
    """
    config = config or {}

    boost_version = _pick("boost_version", args, host, config)
    if not boost_version:
        raise ValidationError("boost_version variable must be set")

    method_name = _pick("method", args, host, config) or "current"
    method = INSTALL_METHODS.get(method_name)
    if method is None:
        raise ValidationError(
            f"Unknown install method '{method_name}' "
            f"(expected one of: {', '.join(sorted(INSTALL_METHODS))})"
        )

    root_dir = _pick("root_dir", args, host, config)

    return InstallSettings(
        boost_version=boost_version,
        toolset=_pick("toolset", args, host, config),
        platform_version=_pick("platform_version", args, host, config),
        root_dir=Path(root_dir) if root_dir else get_default_root_dir(),
        manifest_url=_pick("manifest_url", args, host, config) or DEFAULT_MANIFEST_URL,
        method=method,
    )
