"""Module de configuration : liste de commandes et réglages."""

from diag_snapshot.config.defaults import DEFAULT_COMMAND_CONFIG
from diag_snapshot.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    read_command_config,
)
from diag_snapshot.config.parser import (
    COMMENT_PREFIX,
    DIRECTIVE_IF,
    CommandConfigParser,
    parse_command_list,
)
from diag_snapshot.config.settings import (
    DEFAULT_OUTPUT_DIR,
    CollectorSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_COMMAND_CONFIG",
    "ConfigLoader",
    "FileConfigLoader",
    "read_command_config",
    "COMMENT_PREFIX",
    "DIRECTIVE_IF",
    "CommandConfigParser",
    "parse_command_list",
    "DEFAULT_OUTPUT_DIR",
    "CollectorSettings",
    "load_settings",
]
