#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Runtime configuration for LSC credential generation."""

from __future__ import annotations

from pathlib import Path
import tempfile

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from lsccred.config.defaults import (
    DEFAULT_ALIEN,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_DATA_DIR,
    DEFAULT_FAKEROOT,
    DEFAULT_GENERATOR_SCRIPT,
    DEFAULT_OPENSSL,
    DEFAULT_SSH_KEYGEN,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_timeout(value: str | float) -> float:
    """Parse a positive timeout in seconds."""
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive: {value}")
    return timeout


@define
class LscRuntimeConfig(RuntimeConfig):
    """Runtime configuration for the credential pipeline and CLI."""

    log_level: str = field(
        default="WARNING",
        env_var="LSC_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    data_dir: str = field(
        default=DEFAULT_DATA_DIR,
        env_var="LSC_DATA_DIR",
        metadata={"help": "Directory containing the RPM generator script"},
    )

    generator_script: str = field(
        default=DEFAULT_GENERATOR_SCRIPT,
        env_var="LSC_RPM_GENERATOR",
        metadata={"help": "File name of the RPM generator script inside data_dir"},
    )

    temp_dir: str = field(
        default="",
        env_var="LSC_TEMP_DIR",
        metadata={"help": "Root for temporary workspaces (system temp dir when empty)"},
    )

    command_timeout: float = field(
        default=DEFAULT_COMMAND_TIMEOUT,
        env_var="LSC_COMMAND_TIMEOUT",
        converter=parse_timeout,
        metadata={"help": "Seconds before an external tool invocation is abandoned"},
    )

    ssh_keygen: str = field(default=DEFAULT_SSH_KEYGEN, env_var="LSC_SSH_KEYGEN")
    openssl: str = field(default=DEFAULT_OPENSSL, env_var="LSC_OPENSSL")
    alien: str = field(default=DEFAULT_ALIEN, env_var="LSC_ALIEN")
    fakeroot: str = field(default=DEFAULT_FAKEROOT, env_var="LSC_FAKEROOT")

    @property
    def generator_path(self) -> Path:
        return Path(self.data_dir) / self.generator_script

    @property
    def workspace_root(self) -> Path:
        return Path(self.temp_dir or tempfile.gettempdir())


# 🔑📦🔚
