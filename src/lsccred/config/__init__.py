#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""LSC credential configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from lsccred.config.runtime import LscRuntimeConfig, parse_log_level, parse_timeout

__all__ = [
    "LscRuntimeConfig",
    "parse_log_level",
    "parse_timeout",
]

# 🔑📦🔚
