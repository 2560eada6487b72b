#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Debian package conversion through alien."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger

from lsccred.config import LscRuntimeConfig
from lsccred.exceptions import ExternalToolError
from lsccred.packaging.capabilities import ToolProbe
from lsccred.packaging.naming import converted_package_name
from lsccred.process import ProcessRunner, format_command


class FormatConverter:
    """Turns the RPM into a .deb with ``fakeroot -- alien``."""

    def __init__(self, runner: ProcessRunner, probe: ToolProbe, config: LscRuntimeConfig) -> None:
        self.runner = runner
        self.probe = probe
        self.config = config

    def available(self) -> bool:
        return self.probe.converter_available()

    def convert(self, package_dir: Path, package_file: str, username: str | None) -> Path | None:
        """Convert ``package_file`` inside ``package_dir``.

        Returns:
            Path of the .deb on success, None if alien could not run or failed.
        """
        command = [
            self.config.fakeroot,
            "--",
            self.config.alien,
            "--scripts",
            "--keep-version",
            package_file,
        ]
        display = format_command(command)
        logger.debug("🔄🚀 Executing alien", cwd=str(package_dir), command=display)

        try:
            result = self.runner.execute(command, cwd=package_dir)
        except ExternalToolError as e:
            logger.debug("🔄❌ alien could not be run", command=display, error=str(e))
            return None

        if not result.ok:
            logger.debug(
                "🔄❌ alien failed",
                command=display,
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
            return None

        deb_path = Path(package_dir) / converted_package_name(username)
        logger.info("🔄✅ Debian package created", path=str(deb_path))
        return deb_path


# 🔑📦🔚
