#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bytebrew command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from bytebrew.commands.base64 import base64_group
from bytebrew.commands.convert import convert_command
from bytebrew.commands.hex import hex_group
from bytebrew.commands.xor import xor_command, xor_key_command
from bytebrew.config import BytebrewRuntimeConfig

__version__ = get_version("bytebrew", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="bytebrew",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Hex, Base64 and XOR byte codecs.

    Configure via environment variables:
    - BYTEBREW_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - BYTEBREW_STRICT_XOR: Fail on unequal XOR lengths instead of truncating
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    bytebrew_config = BytebrewRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="bytebrew",
        logging=evolve(
            base_telemetry.logging,
            default_level=bytebrew_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config, force=True)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


# Register simple commands
cli.add_command(xor_command, name="xor")
cli.add_command(xor_key_command, name="xor-key")
cli.add_command(convert_command, name="convert")

# Register command groups
cli.add_command(hex_group, name="hex")
cli.add_command(base64_group, name="base64")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
