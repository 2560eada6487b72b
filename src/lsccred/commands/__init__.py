#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the lsc CLI."""

from __future__ import annotations

from lsccred.commands.check import check_command
from lsccred.commands.create import create_command

__all__ = [
    "check_command",
    "create_command",
]

# 🔑📦🔚
