#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Small filesystem helpers used to shuffle artifacts between workspaces.

Files are copied through memory in one piece. That is fine for keys and
credential packages (a few kilobytes) and unsuitable for large files.
"""

from __future__ import annotations

import os
from pathlib import Path
import stat

from provide.foundation import logger

from lsccred.exceptions import FileOperationError


def remove_recursive(path: Path | str) -> None:
    """Remove a file, or a directory and everything below it.

    Removal stops at the first entry that cannot be removed; the parent
    directory is then left in place.

    Raises:
        FileOperationError: If any entry cannot be listed or removed.
    """
    path = Path(path)
    try:
        is_dir = stat.S_ISDIR(path.lstat().st_mode)
    except OSError:
        # Type unknown: a bare removal either works or reports the real error.
        is_dir = False

    if is_dir:
        try:
            entries = list(path.iterdir())
        except OSError as e:
            logger.warning("📁❌ Failed to list directory", path=str(path), error=str(e))
            raise FileOperationError(f"Failed to list {path}: {e}") from e

        for entry in entries:
            try:
                remove_recursive(entry)
            except FileOperationError:
                logger.warning("🗑️❌ Failed to remove entry", entry=entry.name, parent=str(path))
                raise

        try:
            path.rmdir()
        except OSError as e:
            raise FileOperationError(f"Failed to remove directory {path}: {e}") from e
        return

    try:
        path.unlink()
    except OSError as e:
        raise FileOperationError(f"Failed to remove {path}: {e}") from e


def copy_file(src: Path | str, dst: Path | str) -> None:
    """Copy the content of ``src`` into ``dst``, overwriting ``dst``.

    Raises:
        FileOperationError: If the source cannot be read, the destination
            cannot be opened, or not every byte was written.
    """
    src = Path(src)
    dst = Path(dst)

    try:
        content = src.read_bytes()
    except OSError as e:
        logger.debug("📄❌ Failed to read source", src=str(src), error=str(e))
        raise FileOperationError(f"Failed to read {src}: {e}") from e

    try:
        fd = os.open(dst, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as e:
        logger.debug("📄❌ Failed to open destination", dst=str(dst), error=str(e))
        raise FileOperationError(f"Failed to open {dst}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            written = f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write to {dst}: {e}") from e

    if written != len(content):
        logger.debug("📄❌ Short write", dst=str(dst), written=written, expected=len(content))
        raise FileOperationError(f"Failed to write to {dst} ({written}/{len(content)} bytes)")


def move_file(src: Path | str, dst: Path | str) -> None:
    """Copy ``src`` to ``dst`` and then remove ``src``.

    If the copy fails ``src`` is untouched. If removing ``src`` fails the
    error is still raised, although ``dst`` already holds the content.
    """
    copy_file(src, dst)

    try:
        Path(src).unlink()
    except OSError as e:
        logger.debug("📄❌ Failed to remove moved source", src=str(src), error=str(e))
        raise FileOperationError(f"Failed to remove {src} after copying it to {dst}: {e}") from e


# 🔑📦🔚
