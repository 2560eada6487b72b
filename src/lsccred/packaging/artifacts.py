#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The in-memory result of a pipeline run."""

from __future__ import annotations

from pathlib import Path

from attrs import field, frozen
from provide.foundation import logger

from lsccred.exceptions import FileOperationError


@frozen
class ArtifactBundle:
    """Keys and packages produced for one credential.

    The installer fields stand in for a third package format that is not
    generated; they are always empty.
    """

    public_key: bytes
    private_key: bytes = field(repr=False)
    native_package: bytes = field(repr=False)
    native_package_size: int
    native_package_name: str
    converted_package: bytes = field(repr=False)
    converted_package_size: int
    converted_package_name: str
    installer_package: bytes = field(default=b"", repr=False)
    installer_package_size: int = 0
    warnings: tuple[str, ...] = ()


def _read(path: Path, what: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        logger.debug(f"📥❌ Failed to read {what}", path=str(path), error=str(e))
        raise FileOperationError(f"Failed to read {what} {path}: {e}") from e


def load_artifacts(
    public_key_path: Path,
    private_key_path: Path,
    native_path: Path,
    converted_path: Path,
) -> ArtifactBundle:
    """Read the four artifacts into memory.

    Raises:
        FileOperationError: On the first file that cannot be read.
    """
    public_key = _read(public_key_path, "public key")
    private_key = _read(private_key_path, "private key")
    native = _read(native_path, "RPM package")
    converted = _read(converted_path, "Debian package")

    logger.debug(
        "📥✅ Artifacts loaded",
        rpm_size=len(native),
        deb_size=len(converted),
    )
    return ArtifactBundle(
        public_key=public_key,
        private_key=private_key,
        native_package=native,
        native_package_size=len(native),
        native_package_name=Path(native_path).name,
        converted_package=converted,
        converted_package_size=len(converted),
        converted_package_name=Path(converted_path).name,
    )


# 🔑📦🔚
