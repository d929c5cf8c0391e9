"""FreelancerPro CLI.

Command-line front end for the local data store: sign in, seed demo data,
list records, move tasks across the Kanban board and check data integrity.
"""

from pathlib import Path

import click

from freelancerpro import __version__
from freelancerpro.cli.app_context import AppContext
from freelancerpro.cli.commands.dashboard import dashboard
from freelancerpro.cli.commands.data import add_client, delete_client, list_records, seed_demo
from freelancerpro.cli.commands.session import login, logout, register, whoami
from freelancerpro.cli.commands.tasks import add_task, board, move_task, toggle_task
from freelancerpro.cli.commands.validate import validate_data
from freelancerpro.config import get_config
from freelancerpro.config.logging_config import LoggingConfig, configure_logging, reset_logging
from freelancerpro.utils.logging_utils import LogContext, generate_correlation_id


@click.group(help="FreelancerPro CLI - Manage clients, projects and tasks stored locally")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and full stack traces")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the data files (overrides FREELANCERPRO_DATA_DIR)",
)
@click.pass_context
def cli(ctx, debug: bool, data_dir):
    """FreelancerPro CLI main entry point."""
    config = get_config()
    if data_dir is not None:
        config = config.model_copy(update={"data_dir": data_dir})

    configure_logging(LoggingConfig.from_settings(config, debug=debug))
    ctx.call_on_close(reset_logging)
    ctx.with_resource(
        LogContext(correlation_id=generate_correlation_id(), command=ctx.invoked_subcommand)
    )

    ctx.obj = AppContext.from_config(config, debug=debug)


# Register commands
cli.add_command(register)
cli.add_command(login)
cli.add_command(logout)
cli.add_command(whoami)
cli.add_command(seed_demo)
cli.add_command(list_records)
cli.add_command(add_client)
cli.add_command(delete_client)
cli.add_command(board)
cli.add_command(move_task)
cli.add_command(toggle_task)
cli.add_command(add_task)
cli.add_command(dashboard)
cli.add_command(validate_data)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
