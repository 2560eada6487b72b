#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""LSC credential package generation: RSA keys plus RPM and Debian packages."""

from __future__ import annotations

from provide.foundation.utils import get_version

from lsccred.exceptions import (
    ConfigurationError,
    ExternalToolError,
    FileOperationError,
    LscError,
    PreconditionError,
    ValidationError,
)
from lsccred.package import create_credential_packages, write_bundle
from lsccred.packaging import ArtifactBundle, CredentialPipeline, CredentialRequest

__version__ = get_version("lsc-credentials", caller_file=__file__)

__all__ = [
    "ArtifactBundle",
    "ConfigurationError",
    "CredentialPipeline",
    "CredentialRequest",
    "ExternalToolError",
    "FileOperationError",
    "LscError",
    "PreconditionError",
    "ValidationError",
    "__version__",
    "create_credential_packages",
    "write_bundle",
]

# 🔑📦🔚
