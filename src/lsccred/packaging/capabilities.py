#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Cached discovery of the optional external tools.

Each probe touches the filesystem at most once per ``ToolProbe`` instance.
The process-wide instance from :func:`get_tool_probe` therefore probes once
per process.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import shutil
import threading
from typing import Any, TypeVar

from provide.foundation import logger

from lsccred.config import LscRuntimeConfig

T = TypeVar("T")


class ToolProbe:
    """Write-once, thread-safe cache of tool discovery results."""

    def __init__(self, config: LscRuntimeConfig | None = None) -> None:
        self.config = config or LscRuntimeConfig.from_env()
        self._lock = threading.Lock()
        self._results: dict[str, Any] = {}

    def _memoize(self, key: str, compute: Callable[[], T]) -> T:
        with self._lock:
            if key not in self._results:
                self._results[key] = compute()
            return self._results[key]  # type: ignore[no-any-return]

    def converter_available(self) -> bool:
        """Whether alien can be found on PATH."""
        return self._memoize("alien", self._find_alien)

    def generator_dir(self) -> Path | None:
        """Directory holding the RPM generator script, or None if it is missing."""
        return self._memoize("generator_dir", self._find_generator_dir)

    def _find_alien(self) -> bool:
        found = shutil.which(self.config.alien) is not None
        logger.debug("🔍 Probed for package converter", tool=self.config.alien, found=found)
        return found

    def _find_generator_dir(self) -> Path | None:
        script = self.config.generator_path
        if not script.is_file():
            logger.debug("🔍❌ RPM generator script not found", path=str(script))
            return None
        logger.debug("🔍✅ RPM generator script found", path=str(script))
        return script.parent


_default_probe: ToolProbe | None = None
_default_probe_lock = threading.Lock()


def get_tool_probe() -> ToolProbe:
    """Return the process-wide probe, creating it on first use."""
    global _default_probe
    with _default_probe_lock:
        if _default_probe is None:
            _default_probe = ToolProbe()
        return _default_probe


def reset_tool_probe() -> None:
    """Forget the process-wide probe so the next call probes again."""
    global _default_probe
    with _default_probe_lock:
        _default_probe = None


# 🔑📦🔚
