#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Credential creation command for the lsc CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from lsccred.console import get_command_logger
from lsccred.exceptions import LscError
from lsccred.package import create_credential_packages, write_bundle

log = get_command_logger("create")


@click.command("create")
@click.option("--user", "-u", required=True, help="User name the packages create on the target.")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Login password, also used as key passphrase.",
)
@click.option(
    "--out-dir",
    default=".",
    type=click.Path(file_okay=False, writable=True, resolve_path=True),
    help="Directory to write the keys and packages to.",
)
@click.pass_context
def create_command(ctx: click.Context, user: str, password: str, out_dir: str) -> None:
    """Creates an RSA keypair and RPM/Debian packages installing it for USER."""
    config = (ctx.obj or {}).get("config")
    log.debug("Creating credential packages", user=user, out_dir=out_dir)

    try:
        bundle = create_credential_packages(user, password, config=config)
    except LscError as e:
        stage = e.stage.value if e.stage is not None else "unknown"
        log.error("Credential creation failed", user=user, stage=stage, error=str(e))
        perr(f"❌ Credential creation failed during {stage}: {e}")
        raise click.Abort() from e

    written = write_bundle(bundle, Path(out_dir), user)
    for warning in bundle.warnings:
        perr(f"⚠️ {warning}")

    log.info("Credential packages written", user=user, out_dir=out_dir)
    pout(f"✅ Credential packages for '{user}' written to '{out_dir}':")
    for path in written:
        pout(f"  - {path.name}")


# 🔑📦🔚
