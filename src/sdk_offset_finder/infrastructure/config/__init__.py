"""Infrastructure configuration module."""

from .application_config import Config, ConfigError, InputFormat, infer_input_format

__all__ = ["Config", "ConfigError", "InputFormat", "infer_input_format"]
