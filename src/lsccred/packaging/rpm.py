#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RPM package generation through the openvas-lsc-rpm-creator script."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir

from lsccred.config import LscRuntimeConfig
from lsccred.config.defaults import BUILD_SUBDIR
from lsccred.exceptions import ConfigurationError, FileOperationError
from lsccred.packaging.capabilities import ToolProbe
from lsccred.packaging.login import LoginDescriptor
from lsccred.packaging.naming import native_package_name, public_key_file_name
from lsccred.packaging.workspace import Workspace
from lsccred.process import ProcessRunner, check_result, format_command
from lsccred.utils.fileops import copy_file, move_file


class NativePackageBuilder:
    """Builds an RPM that installs a login's public key.

    The build runs inside a workspace owned by the caller, who is also
    responsible for removing it.
    """

    def __init__(self, runner: ProcessRunner, probe: ToolProbe, config: LscRuntimeConfig) -> None:
        self.runner = runner
        self.probe = probe
        self.config = config

    def build(self, login: LoginDescriptor, workspace: Workspace, destination: Path) -> Path:
        """Build the RPM for ``login`` and move it to ``destination``.

        Returns:
            The destination path.

        Raises:
            ConfigurationError: If the generator script cannot be found.
            FileOperationError: If copying the key or moving the RPM fails.
            ExternalToolError: If the generator script fails.
        """
        generator_dir = self.probe.generator_dir()
        if generator_dir is None:
            raise ConfigurationError(f"RPM generator script {self.config.generator_path} not found")

        target = workspace.path / BUILD_SUBDIR
        try:
            ensure_dir(target)
        except OSError as e:
            raise FileOperationError(f"Failed to create build directory {target}: {e}") from e

        key_copy = target / public_key_file_name(login.username)
        logger.debug("📋 Copying public key into build directory", src=str(login.public_key_path))
        copy_file(login.public_key_path, key_copy)

        command = [
            f"./{self.config.generator_script}",
            "--target",
            str(target),
            str(key_copy),
        ]
        logger.debug("📦🚀 Attempting RPM build", cwd=str(generator_dir), command=format_command(command))
        result = self.runner.execute(command, cwd=generator_dir)
        check_result(self.config.generator_script, result, format_command(command))

        built = target / native_package_name(login.username)
        if not built.is_file():
            raise FileOperationError(f"Expected RPM {built.name} was not produced")

        move_file(built, destination)
        logger.info("📦✅ RPM built", package=built.name, path=str(destination))
        return Path(destination)


# 🔑📦🔚
