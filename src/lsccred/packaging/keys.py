#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RSA keypair generation through ssh-keygen and openssl."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir

from lsccred.config import LscRuntimeConfig
from lsccred.config.defaults import (
    DEFAULT_DIR_PERMS,
    KEY_ALGORITHM,
    MIN_PASSPHRASE_LENGTH,
    PASSIN_ENV_VAR,
    PASSOUT_ENV_VAR,
    PKCS8_CIPHER,
)
from lsccred.exceptions import FileOperationError, PreconditionError, ValidationError
from lsccred.packaging.login import LoginDescriptor
from lsccred.packaging.naming import strip_public_suffix
from lsccred.process import ProcessRunner, check_result, format_command


def _ensure_parent(path: Path) -> None:
    try:
        ensure_dir(path.parent, mode=DEFAULT_DIR_PERMS)
    except OSError as e:
        logger.debug("📁❌ Failed to create key directory", path=str(path.parent), error=str(e))
        raise FileOperationError(f"Failed to access {path.parent}: {e}") from e


class KeypairGenerator:
    """Creates the public key and a PKCS#8 encrypted private key for a login.

    Generation is two separate tool runs: ssh-keygen synthesises the pair,
    openssl re-encrypts the private half.
    """

    def __init__(self, runner: ProcessRunner, config: LscRuntimeConfig) -> None:
        self.runner = runner
        self.config = config

    def generate(self, login: LoginDescriptor) -> None:
        """Create both keys for ``login``, reusing its passphrase on both sides."""
        self.create_public_key(login.comment, login.key_passphrase, login.public_key_path)
        self.create_private_key(
            login.public_key_path,
            login.private_key_path,
            login.key_passphrase,
            login.key_passphrase,
        )

    def create_public_key(self, comment: str, passphrase: str, public_key_path: Path) -> None:
        """Run ``ssh-keygen -t rsa`` so that ``public_key_path`` holds the public key.

        The raw private key lands next to it, without the ``.pub`` suffix.

        Raises:
            ValidationError: If the comment is empty or the passphrase too short.
            FileOperationError: If the key directory cannot be created.
            ExternalToolError: If ssh-keygen fails.
        """
        if not comment:
            raise ValidationError("Key comment must be set")
        if not passphrase or len(passphrase) < MIN_PASSPHRASE_LENGTH:
            raise ValidationError(f"Passphrase must be at least {MIN_PASSPHRASE_LENGTH} characters long")

        public_key_path = Path(public_key_path)
        _ensure_parent(public_key_path)
        stripped = strip_public_suffix(public_key_path)

        command = [
            self.config.ssh_keygen,
            "-t",
            KEY_ALGORITHM,
            "-f",
            str(stripped),
            "-C",
            comment,
            "-P",
            passphrase,
            "-q",
        ]
        logger.debug("🔑🚀 Creating public key", path=str(public_key_path))
        result = self.runner.execute(command, redact=[passphrase])
        check_result("ssh-keygen", result, format_command(command, [passphrase]))
        logger.info("🔑✅ Public key created", path=str(public_key_path))

    def create_private_key(
        self,
        public_key_path: Path,
        private_key_path: Path,
        passphrase_pub: str,
        passphrase_priv: str,
    ) -> None:
        """Convert the raw key next to ``public_key_path`` into encrypted PKCS#8.

        Raises:
            ValidationError: If either passphrase is missing.
            PreconditionError: If the public key is missing or the private key
                already exists.
            FileOperationError: If the key directory cannot be created.
            ExternalToolError: If openssl fails.
        """
        if not passphrase_pub or not passphrase_priv:
            raise ValidationError("Both key passphrases must be set")

        public_key_path = Path(public_key_path)
        private_key_path = Path(private_key_path)
        if not public_key_path.exists():
            raise PreconditionError(f"Public key {public_key_path} not found")
        if private_key_path.exists():
            raise PreconditionError(f"Private key {private_key_path} already exists")
        _ensure_parent(private_key_path)

        command = [
            self.config.openssl,
            "pkcs8",
            "-topk8",
            "-v2",
            PKCS8_CIPHER,
            "-in",
            str(strip_public_suffix(public_key_path)),
            "-passin",
            f"env:{PASSIN_ENV_VAR}",
            "-out",
            str(private_key_path),
            "-passout",
            f"env:{PASSOUT_ENV_VAR}",
        ]
        env = {PASSIN_ENV_VAR: passphrase_pub, PASSOUT_ENV_VAR: passphrase_priv}
        logger.debug("🔐🚀 Creating private key", path=str(private_key_path))
        result = self.runner.execute(command, env=env)
        check_result("openssl", result, format_command(command))
        logger.info("🔐✅ Private key created", path=str(private_key_path))


# 🔑📦🔚
