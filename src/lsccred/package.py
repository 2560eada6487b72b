#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for LSC credential package generation."""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir

from lsccred.config import LscRuntimeConfig
from lsccred.config.defaults import DEFAULT_PRIVATE_KEY_PERMS
from lsccred.packaging.artifacts import ArtifactBundle
from lsccred.packaging.login import CredentialRequest
from lsccred.packaging.orchestrator import CredentialPipeline
from lsccred.process import ProcessRunner


def create_credential_packages(
    name: str,
    password: str,
    *,
    runner: ProcessRunner | None = None,
    config: LscRuntimeConfig | None = None,
) -> ArtifactBundle:
    """Create an RSA keypair plus RPM and Debian packages installing it for ``name``.

    The password is used as the login password and as passphrase for both
    keys. Nothing is left on disk once this returns.

    Args:
        name: User name the packages create on the target host
        password: Login password and key passphrase (at least 5 characters)
        runner: Process runner for the external tools (default: provide.foundation)
        config: Runtime configuration (default: loaded from the environment)

    Returns:
        ArtifactBundle with both keys and both packages

    Raises:
        LscError: If any stage fails; no partial result is returned.

    Example:
        ```python
        from lsccred import create_credential_packages

        bundle = create_credential_packages("alice", "s3cretpw")
        print(bundle.native_package_name, bundle.native_package_size)
        ```
    """
    pipeline = CredentialPipeline(runner=runner, config=config)
    return pipeline.run(CredentialRequest(name=name, password=password))


def write_bundle(bundle: ArtifactBundle, out_dir: Path, username: str) -> list[Path]:
    """Write the artifacts of ``bundle`` into ``out_dir``.

    The private key is written with owner-only permissions.

    Returns:
        Paths of the written files: public key, private key, RPM, .deb.
    """
    ensure_dir(out_dir)
    public_path = out_dir / f"{username}.pub"
    private_path = out_dir / f"{username}.p8"
    rpm_path = out_dir / bundle.native_package_name
    deb_path = out_dir / bundle.converted_package_name

    public_path.write_bytes(bundle.public_key)
    fd = os.open(private_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, DEFAULT_PRIVATE_KEY_PERMS)
    with os.fdopen(fd, "wb") as f:
        f.write(bundle.private_key)
    private_path.chmod(DEFAULT_PRIVATE_KEY_PERMS)
    rpm_path.write_bytes(bundle.native_package)
    deb_path.write_bytes(bundle.converted_package)

    logger.debug("💾 Wrote credential artifacts", out_dir=str(out_dir), files=4)
    return [public_path, private_path, rpm_path, deb_path]


# 🔑📦🔚
