#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for LSC credential generation."""

from __future__ import annotations

# =================================
# File permissions defaults
# =================================
DEFAULT_DIR_PERMS = 0o755  # rwxr-xr-x
DEFAULT_PRIVATE_KEY_PERMS = 0o600  # Read/write for owner only

# =================================
# Key defaults
# =================================
KEY_ALGORITHM = "rsa"
KEY_NAME = "key_name"
KEY_COMMENT = "Key generated by OpenVAS Manager"
PUBLIC_KEY_FILE = "key.pub"
PRIVATE_KEY_FILE = "key.priv"
PUBLIC_KEY_SUFFIX = ".pub"
MIN_PASSPHRASE_LENGTH = 5
PKCS8_CIPHER = "des3"
PASSIN_ENV_VAR = "LSC_PASSIN"
PASSOUT_ENV_VAR = "LSC_PASSOUT"

# =================================
# Package naming
# =================================
PACKAGE_PREFIX = "openvas-lsc-target"
PACKAGE_VERSION = "0.5-1"
NATIVE_ARCH = "noarch"
NATIVE_EXTENSION = "rpm"
CONVERTED_ARCH = "all"
CONVERTED_EXTENSION = "deb"
FALLBACK_USERNAME = "user"

# =================================
# Workspace defaults
# =================================
KEY_WORKSPACE_PREFIX = "key_"
PACKAGE_WORKSPACE_PREFIX = "rpm_"
BUILD_SUBDIR = "build"

# =================================
# External tool defaults
# =================================
DEFAULT_DATA_DIR = "/usr/share/openvas"
DEFAULT_GENERATOR_SCRIPT = "openvas-lsc-rpm-creator.sh"
DEFAULT_SSH_KEYGEN = "ssh-keygen"
DEFAULT_OPENSSL = "openssl"
DEFAULT_ALIEN = "alien"
DEFAULT_FAKEROOT = "fakeroot"
DEFAULT_COMMAND_TIMEOUT = 300.0

# 🔑📦🔚
