#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""This package contains the key generation, package building and
conversion stages, and the pipeline that sequences them."""

from lsccred.packaging.artifacts import ArtifactBundle, load_artifacts
from lsccred.packaging.login import CredentialRequest, LoginDescriptor
from lsccred.packaging.orchestrator import CredentialPipeline, PipelineState

__all__ = [
    "ArtifactBundle",
    "CredentialPipeline",
    "CredentialRequest",
    "LoginDescriptor",
    "PipelineState",
    "load_artifacts",
]

# 🔑📦🔚
