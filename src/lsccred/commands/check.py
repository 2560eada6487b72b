#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tool availability check for the lsc CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from lsccred.console import get_command_logger
from lsccred.packaging.capabilities import ToolProbe

log = get_command_logger("check")


@click.command("check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Reports whether alien and the RPM generator script are available."""
    config = (ctx.obj or {}).get("config")
    probe = ToolProbe(config)

    alien_ok = probe.converter_available()
    generator_dir = probe.generator_dir()
    log.debug("Tool check", alien=alien_ok, generator_dir=str(generator_dir))

    pout(f"{'✅' if alien_ok else '❌'} alien: {'found' if alien_ok else 'not found'} ({probe.config.alien})")
    if generator_dir is not None:
        pout(f"✅ RPM generator: {probe.config.generator_path}")
    else:
        pout(f"❌ RPM generator: not found ({probe.config.generator_path})")

    if not (alien_ok and generator_dir is not None):
        ctx.exit(1)


# 🔑📦🔚
