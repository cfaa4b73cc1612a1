"""Transaction management commands."""

import click
from ledgerly.domain.transaction import TransactionService
from ledgerly.domain.account import AccountService
from ledgerly.domain.entities import TRANSACTION_TYPES
from ledgerly.cli.account_resolution import resolve_optional_account_or_exit
from ledgerly.cli.display import echo_transactions
from ledgerly.cli.error_handling import handle_domain_error
from ledgerly.utils.date_parser import parse_optional_date
from ledgerly.utils.amount_parser import parse_amount


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--account", help="Account name or ID")
@click.option("--recurring", "recurring_only", is_flag=True, help="Show only generated recurring transactions")
@click.pass_context
def list_transactions(ctx, start_date: str | None, end_date: str | None, account: str | None, recurring_only: bool):
    """View transactions with optional filters.

    Generated recurring transactions show their rule ID in the Rule column.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    account_service = AccountService(db)

    try:
        start = parse_optional_date(start_date)
        end = parse_optional_date(end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)

    transactions = service.list_transactions(
        start_date=start, end_date=end, account_id=account_id, recurring_only=recurring_only
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    accounts = {acc.id: acc.name for acc in account_service.list_accounts()}
    echo_transactions(transactions, accounts)


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--type", "txn_type", type=click.Choice(TRANSACTION_TYPES), help="Transaction type")
@click.option("--amount", help="Positive amount (e.g., 12.50)")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--account", help="Account name or ID")
@click.option("--to-account", help="Destination account name or ID (transfers only)")
@click.option("--category", help="Category")
@click.option("--description", help="Transaction description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    txn_type: str | None,
    amount: str | None,
    date: str | None,
    account: str | None,
    to_account: str | None,
    category: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Editing a generated recurring
    transaction does not change its rule.

    Examples:
        ledgerly transaction update 1 --amount 75.00
        ledgerly transaction update 1 --category groceries --date 2024-01-16
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)
    dest_account_id = resolve_optional_account_or_exit(ctx, account_service, to_account)

    try:
        txn_date = parse_optional_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction_service.update_transaction(
            transaction_id=transaction_id,
            amount=txn_amount,
            type=txn_type,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category,
            description=description,
            date=txn_date,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        ledgerly transaction delete 1
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    txn = transaction_service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
