"""Parsing options and their loaders.

Options can be built directly, read from the environment, or loaded from a
YAML file:

    parsing:
      validate_checksum: true

Checksum validation is off by default because the weighting used is a
best-effort approximation of an unpublished algorithm.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

VALIDATE_CHECKSUM_ENV = "EGYPT_NID_VALIDATE_CHECKSUM"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_bool(raw: str, name: str) -> bool:
    """Parse a boolean flag from an environment-style string.

    Raises:
        ValueError: If the value is not a recognised boolean spelling.
    """
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {raw!r}")


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling National ID construction.

    Attributes:
        validate_checksum: Reject IDs whose 14th digit does not match the
            best-effort checksum.
    """

    validate_checksum: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.validate_checksum, bool):
            raise ValueError(
                f"validate_checksum must be a bool, got {type(self.validate_checksum).__name__}"
            )

    @classmethod
    def from_env(cls) -> "ParseOptions":
        """Build options from ``EGYPT_NID_VALIDATE_CHECKSUM``.

        Raises:
            ValueError: If the variable holds an unrecognised value.
        """
        raw = os.getenv(VALIDATE_CHECKSUM_ENV, "false")
        return cls(validate_checksum=parse_bool(raw, VALIDATE_CHECKSUM_ENV))


DEFAULT_OPTIONS = ParseOptions()


def load_options_from_yaml(path: Path | str) -> ParseOptions:
    """Load parsing options from a YAML file.

    A missing ``parsing`` section, or an empty file, yields the defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The loaded ParseOptions.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return ParseOptions()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    section = data.get("parsing", {})
    if section is None:
        return ParseOptions()

    if not isinstance(section, dict):
        raise ValueError(
            f"Invalid parsing section: expected dict, got {type(section).__name__}"
        )

    unknown = set(section) - {"validate_checksum"}
    if unknown:
        raise ValueError(f"Unknown parsing option(s): {', '.join(sorted(unknown))}")

    return ParseOptions(validate_checksum=section.get("validate_checksum", False))


def load_options_from_yaml_safe(path: Path | str) -> tuple[ParseOptions, Optional[str]]:
    """Load options, returning defaults and an error message on failure.

    Returns:
        Tuple of (options, error_message). If successful, error_message is None.
    """
    try:
        return load_options_from_yaml(path), None
    except FileNotFoundError as e:
        return ParseOptions(), str(e)
    except ValueError as e:
        return ParseOptions(), f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return ParseOptions(), f"YAML parsing error: {e}"
