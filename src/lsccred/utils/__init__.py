#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Filesystem utilities."""

from __future__ import annotations

from lsccred.utils.fileops import copy_file, move_file, remove_recursive

__all__ = [
    "copy_file",
    "move_file",
    "remove_recursive",
]

# 🔑📦🔚
