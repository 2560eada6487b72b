#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for LSC credential package generation."""

from __future__ import annotations

from typing import Any

from provide.foundation.errors import FoundationError


class LscError(FoundationError):
    """Base exception for all LSC credential errors.

    The pipeline tags every error with the stage it failed in before it
    propagates to the caller.
    """

    stage: Any = None


class ValidationError(LscError):
    """Raised when a credential request or key parameter is invalid."""

    pass


class ConfigurationError(LscError):
    """Raised when a required external tool or generator script is missing."""

    pass


class PreconditionError(LscError):
    """Raised when a file that must exist is missing, or must not exist is present."""

    pass


class FileOperationError(LscError):
    """Raised for read, write, copy, move or remove failures."""

    pass


class ExternalToolError(LscError):
    """Raised when an external tool exits non-zero, dies, or cannot be launched.

    Captured output is kept on the instance for diagnostics and is never part
    of the message.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        returncode: int | None = None,
        stdout: str | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ToolLaunchError(ExternalToolError):
    """Raised when an external tool could not be started at all."""

    pass


# 🔑📦🔚
