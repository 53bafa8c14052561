# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from pathlib import Path

import typer
from dotenv import load_dotenv
from loguru import logger

from svnharvest.commands import extract, parse
from svnharvest.constants import APP_NAME
from svnharvest.context import GlobalConfig, GlobalContext
from svnharvest.core.config.config_loader import ConfigLoader
from svnharvest.core.exceptions import handle_svnharvest_exception
from svnharvest.core.logging.logging import setup_logger
from svnharvest.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: turn svn history into structured commits",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# Main cli commands
app.command(name="extract")(extract.main)
app.command(name="parse")(parse.main)


def load_global_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {}

    for key, item in input_args.items():
        if item is not None:
            config_args[key] = item

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        is_eager=True,
        help=f"Show log path (where logs for {APP_NAME} live) and exit",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    svn_executable: str | None = typer.Option(
        None,
        "--svn-executable",
        help="Name or path of the svn executable.",
    ),
    max_attempts: int | None = typer.Option(
        None,
        "--max-attempts",
        help="How often an svn command is executed before giving up.",
    ),
    queue_capacity: int | None = typer.Option(
        None,
        "--queue-capacity",
        help="Number of extracted commits buffered before the extractor waits.",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help="Do not output any log text to the console.",
    ),
) -> None:
    """
    Global setup callback. Initialize global context/config used by commands
    """
    with handle_svnharvest_exception(exit_on_fail=True):
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        # initial setup of logger, will be updated once the config is known
        setup_logger(
            ctx.invoked_subcommand, debug=verbose or False, silent=silent or False
        )

        config, used_config_sources, used_default = load_global_config(
            custom_config,
            svn_executable=svn_executable,
            max_attempts=max_attempts,
            queue_capacity=queue_capacity,
            verbose=verbose,
            silent=silent,
        )

        setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)

        if used_default:
            logger.debug("Some configuration values fall back to their defaults.")
        logger.debug(f"Used {used_config_sources} to build global context.")

        ctx.obj = GlobalContext.from_global_config(config)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # Set up signal handlers for graceful shutdown
    setup_signal_handlers()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name="svh")


if __name__ == "__main__":
    run_app()
