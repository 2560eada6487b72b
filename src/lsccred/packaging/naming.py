#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""File naming conventions imposed by the external packaging tools.

The generator script and alien decide what their output is called; these
functions reproduce those names so the pipeline can find the files.
"""

from __future__ import annotations

from pathlib import Path

from lsccred.config.defaults import (
    CONVERTED_ARCH,
    CONVERTED_EXTENSION,
    FALLBACK_USERNAME,
    NATIVE_ARCH,
    NATIVE_EXTENSION,
    PACKAGE_PREFIX,
    PACKAGE_VERSION,
    PUBLIC_KEY_SUFFIX,
)


def native_package_name(username: str) -> str:
    """Name of the RPM the generator script writes, e.g.
    ``openvas-lsc-target-alice-0.5-1.noarch.rpm``."""
    return f"{PACKAGE_PREFIX}-{username}-{PACKAGE_VERSION}.{NATIVE_ARCH}.{NATIVE_EXTENSION}"


def converted_package_name(username: str | None) -> str:
    """Name of the package alien writes, e.g. ``openvas-lsc-target-alice_0.5-1_all.deb``.

    alien lower-cases the package name.
    """
    name = (username or FALLBACK_USERNAME).lower()
    return f"{PACKAGE_PREFIX}-{name}_{PACKAGE_VERSION}_{CONVERTED_ARCH}.{CONVERTED_EXTENSION}"


def public_key_file_name(username: str) -> str:
    return f"{username}{PUBLIC_KEY_SUFFIX}"


def strip_public_suffix(path: Path | str) -> Path:
    """Drop a trailing ``.pub``; ssh-keygen takes the private key path and adds it."""
    text = str(path)
    if text.endswith(PUBLIC_KEY_SUFFIX):
        text = text[: -len(PUBLIC_KEY_SUFFIX)]
    return Path(text)


# 🔑📦🔚
