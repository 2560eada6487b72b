#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Temporary workspaces owned by a single pipeline run."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
import tempfile

from attrs import define
from provide.foundation import logger

from lsccred.exceptions import FileOperationError
from lsccred.utils.fileops import remove_recursive


@define
class Workspace:
    """An exclusively owned temporary directory."""

    path: Path
    prefix: str
    released: bool = False


class WorkspaceAllocator:
    """Creates workspaces atomically and removes them exactly once."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root

    def allocate(self, prefix: str) -> Workspace:
        """Create a new workspace with an unpredictable name.

        Raises:
            FileOperationError: If the directory cannot be created.
        """
        try:
            path = Path(tempfile.mkdtemp(prefix=prefix, dir=self.root))
        except OSError as e:
            raise FileOperationError(f"Failed to create temporary directory: {e}") from e
        logger.debug("📁✨ Allocated workspace", path=str(path))
        return Workspace(path=path, prefix=prefix)

    def release(self, workspace: Workspace) -> None:
        """Remove the workspace and everything in it.

        Raises:
            FileOperationError: If the removal fails. The workspace counts as
                released either way.
        """
        if workspace.released:
            return
        workspace.released = True
        remove_recursive(workspace.path)
        logger.debug("📁🗑️ Released workspace", path=str(workspace.path))

    @contextmanager
    def scoped(self, prefix: str, failures: list[str] | None = None) -> Iterator[Workspace]:
        """Allocate a workspace that is released when the block exits.

        A failed release is logged and appended to ``failures``; it never
        replaces an exception already leaving the block.
        """
        workspace = self.allocate(prefix)
        try:
            yield workspace
        finally:
            try:
                self.release(workspace)
            except FileOperationError as e:
                logger.warning("📁⚠️ Failed to remove workspace", path=str(workspace.path), error=str(e))
                if failures is not None:
                    failures.append(f"Failed to remove temporary directory {workspace.path}: {e}")


# 🔑📦🔚
