#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""LSC credential command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from lsccred.commands.check import check_command
from lsccred.commands.create import create_command
from lsccred.config import LscRuntimeConfig

__version__ = get_version("lsc-credentials", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="lsc",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Local security check credential package builder.

    Configure via environment variables:
    - LSC_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - LSC_DATA_DIR: Directory holding openvas-lsc-rpm-creator.sh
    - LSC_TEMP_DIR: Root for temporary workspaces
    - LSC_COMMAND_TIMEOUT: Seconds allowed per external tool run
    """
    ctx.ensure_object(dict)

    lsc_config = LscRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="lsc-credentials",
        logging=evolve(
            base_telemetry.logging,
            default_level=lsc_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = lsc_config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(create_command, name="create")
cli.add_command(check_command, name="check")

main = cli

if __name__ == "__main__":
    cli()

# 🔑📦🔚
