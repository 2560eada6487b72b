#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Process execution capability used for every external tool invocation.

The pipeline only talks to :class:`ProcessRunner`. The default
implementation delegates to ``provide.foundation.process.run``; tests inject
fakes that emulate the tools.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from attrs import frozen
from provide.foundation import logger
from provide.foundation.errors import ProcessTimeoutError
from provide.foundation.process import ProcessError, run

from lsccred.exceptions import ExternalToolError, ToolLaunchError

REDACTED = "***"


@frozen
class ProcessResult:
    """Exit status and captured output of a finished process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def signaled(self) -> bool:
        """True when the process was killed by a signal."""
        return self.returncode < 0


class ProcessRunner(Protocol):
    """Runs a command to completion.

    Launch failures raise :class:`ToolLaunchError`; a process that ran but
    failed is reported through ``ProcessResult.returncode``. Secrets belong
    in ``env``, never in ``command``.
    """

    def execute(
        self,
        command: Sequence[str],
        cwd: Path | None = None,
        *,
        redact: Sequence[str] = (),
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult: ...


def format_command(command: Sequence[str], redact: Sequence[str] = ()) -> str:
    """Render a command for logs with every secret replaced."""
    rendered = " ".join(str(part) for part in command)
    for secret in redact:
        if secret:
            rendered = rendered.replace(secret, REDACTED)
    return rendered


class FoundationProcessRunner:
    """ProcessRunner backed by ``provide.foundation.process.run``."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def execute(
        self,
        command: Sequence[str],
        cwd: Path | None = None,
        *,
        redact: Sequence[str] = (),
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        display = format_command(command, redact)
        logger.debug("💻🚀📋 Running command", command=display, cwd=str(cwd) if cwd else None)

        # Foundation errors embed the raw command line; only `display` is surfaced.
        try:
            result = run(
                [str(part) for part in command],
                cwd=cwd,
                env=dict(env) if env else None,
                capture_output=True,
                check=False,  # Exit status is judged by the caller
                timeout=self.timeout,
            )
        except ProcessTimeoutError as e:
            raise ExternalToolError(
                f"{command[0]} timed out after {self.timeout}s", command=display
            ) from e
        except ProcessError as e:
            cause = e.__cause__
            if isinstance(cause, OSError):
                reason = cause.strerror or type(cause).__name__
                raise ToolLaunchError(f"Failed to launch {command[0]}: {reason}", command=display) from e
            raise ExternalToolError(f"{command[0]} did not complete", command=display) from e

        logger.trace("💻✅📋 Command finished", command=display, returncode=result.returncode)
        return ProcessResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )


def check_result(tool: str, result: ProcessResult, display: str) -> None:
    """Raise ExternalToolError unless ``result`` is a clean exit.

    Captured output is attached to the error and logged at debug level only.
    """
    if result.ok:
        return

    logger.debug(
        f"🔧❌ {tool} failed",
        command=display,
        returncode=result.returncode,
        signaled=result.signaled,
        stdout=result.stdout,
        stderr=result.stderr,
    )
    if result.signaled:
        message = f"{tool} was terminated by signal {-result.returncode}"
    else:
        message = f"{tool} exited with status {result.returncode}"
    raise ExternalToolError(
        message,
        command=display,
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


# 🔑📦🔚
