#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Credential request and the login descriptor derived from it."""

from __future__ import annotations

from pathlib import Path

from attrs import define, field, frozen

from lsccred.config.defaults import (
    KEY_COMMENT,
    KEY_NAME,
    MIN_PASSPHRASE_LENGTH,
    PRIVATE_KEY_FILE,
    PUBLIC_KEY_FILE,
)
from lsccred.exceptions import ValidationError


@frozen
class CredentialRequest:
    """User name and password for one credential; the password doubles as key passphrase."""

    name: str
    password: str = field(repr=False)

    def validate(self) -> None:
        if not self.name:
            raise ValidationError("User name must not be empty")
        if "/" in self.name or "\\" in self.name or "\0" in self.name:
            raise ValidationError("User name must not contain path separators or NUL")
        if not self.password or len(self.password) < MIN_PASSPHRASE_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSPHRASE_LENGTH} characters long")


@define
class LoginDescriptor:
    """Everything the generators need to know about one login."""

    key_name: str
    public_key_path: Path
    private_key_path: Path
    key_passphrase: str = field(repr=False)
    comment: str
    username: str
    user_password: str = field(repr=False)

    @classmethod
    def for_request(cls, request: CredentialRequest, key_dir: Path) -> LoginDescriptor:
        return cls(
            key_name=KEY_NAME,
            public_key_path=key_dir / PUBLIC_KEY_FILE,
            private_key_path=key_dir / PRIVATE_KEY_FILE,
            key_passphrase=request.password,
            comment=KEY_COMMENT,
            username=request.name,
            user_password=request.password,
        )

    def wipe(self) -> None:
        """Drop the references to the secrets held by this descriptor."""
        self.key_passphrase = ""
        self.user_password = ""


# 🔑📦🔚
