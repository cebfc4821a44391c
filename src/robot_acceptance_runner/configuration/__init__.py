"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_run_configuration, split_comma_separated
from .run_settings import (
    CommandLineOverrides,
    ExternalRunnerSettings,
    OverridableList,
    RunConfiguration,
)

__all__ = [
    "CommandLineOverrides",
    "ExternalRunnerSettings",
    "OverridableList",
    "RunConfiguration",
    "ConfigurationError",
    "load_run_configuration",
    "split_comma_separated",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
