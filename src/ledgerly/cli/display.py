"""CLI display helpers shared by several commands."""

import click

from ledgerly.domain.entities import Transaction


def echo_transactions(transactions: list[Transaction], account_names: dict[int, str]) -> None:
    """Print transactions as a compact table followed by totals."""
    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<9} {'Amount':>12}  {'Account':<20} "
        f"{'Category':<20} {'Description':<25} {'Rule':<5}"
    )
    click.echo("-" * 110)

    for txn in transactions:
        account_name = account_names.get(txn.account_id, "Unknown")
        if txn.dest_account_id is not None:
            account_name = f"{account_name} -> {account_names.get(txn.dest_account_id, 'Unknown')}"
        rule = str(txn.recurring_rule_id) if txn.is_recurring_instance else ""

        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.type:<9} {txn.amount:>12,.2f}  "
            f"{account_name[:20]:<20} {txn.category[:20]:<20} {txn.description[:25]:<25} {rule:<5}"
        )

    total_expenses = sum(txn.amount for txn in transactions if txn.type == "expense")
    total_income = sum(txn.amount for txn in transactions if txn.type == "income")
    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<6} Expenses: {total_expenses:,.2f} | "
        f"Income: {total_income:,.2f} | Count: {len(transactions)}"
    )
