import click

from ordering.infrastructure.bootstrap import DEFAULT_LOG_LEVEL, configure_logging
from ordering.infrastructure.cli.bank_commands import bank_run
from ordering.infrastructure.cli.order_commands import order_build


@click.group()
@click.option(
    "--log-level",
    envvar="ORDERING_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (env: ORDERING_LOG_LEVEL).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Shortcut for --log-level INFO.")
def cli(log_level: str, verbose: bool) -> None:
    """Aggregate design rules — orders and bank accounts, in memory."""
    configure_logging("INFO" if verbose else log_level)


@cli.group()
def order() -> None:
    """Build and ship orders."""


@cli.group()
def bank() -> None:
    """Run bank account operations."""


# Register subcommands
order.add_command(order_build)
bank.add_command(bank_run)
