"""Configuration module for egypt-national-id."""

from egypt_national_id.config.options import (
    DEFAULT_OPTIONS,
    VALIDATE_CHECKSUM_ENV,
    ParseOptions,
    load_options_from_yaml,
    load_options_from_yaml_safe,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "VALIDATE_CHECKSUM_ENV",
    "ParseOptions",
    "load_options_from_yaml",
    "load_options_from_yaml_safe",
]
