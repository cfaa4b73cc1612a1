"""Add transaction command."""

import click
from ledgerly.domain.transaction import TransactionService
from ledgerly.domain.account import AccountService
from ledgerly.domain.entities import TRANSACTION_TYPES
from ledgerly.cli.account_resolution import resolve_optional_account_or_exit
from ledgerly.cli.error_handling import handle_domain_error
from ledgerly.utils.date_parser import parse_date
from ledgerly.utils.amount_parser import parse_amount


@click.command("add")
@click.option("--type", "txn_type", type=click.Choice(TRANSACTION_TYPES), required=True, help="Transaction type")
@click.option("--amount", required=True, help="Positive amount (e.g., 12.50)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--account", help="Account name or ID (defaults to the main account)")
@click.option("--to-account", help="Destination account name or ID (transfers only)")
@click.option("--category", default="", help="Category (required unless transfer)")
@click.option("--description", default="", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    txn_type: str,
    amount: str,
    date: str,
    account: str | None,
    to_account: str | None,
    category: str,
    description: str,
):
    """Add a transaction manually.

    Examples:
        ledgerly add --type expense --amount 42.10 --category groceries
        ledgerly add --type transfer --amount 200 --account "Main Account" --to-account Savings
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)
    dest_account_id = resolve_optional_account_or_exit(ctx, account_service, to_account)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = transaction_service.create_transaction(
            amount=txn_amount,
            type=txn_type,
            date=txn_date,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    txn = transaction_service.get_transaction(transaction_id)
    account_obj = account_service.get_account(txn.account_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Account: {account_obj.name}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {txn.amount:,.2f} ({txn.type})")
    if txn.category:
        click.echo(f"  Category: {txn.category}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
