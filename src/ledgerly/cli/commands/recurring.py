"""Recurring rule commands."""

import calendar

import click
from sqlalchemy.exc import SQLAlchemyError

from ledgerly.cli.account_resolution import resolve_optional_account_or_exit
from ledgerly.cli.display import echo_transactions
from ledgerly.cli.error_handling import handle_domain_error
from ledgerly.domain.account import AccountService
from ledgerly.domain.entities import FREQUENCIES, TRANSACTION_TYPES, RecurringRule
from ledgerly.domain.generator import RecurringGenerator
from ledgerly.domain.recurring import RecurringRuleService
from ledgerly.utils.amount_parser import parse_amount
from ledgerly.utils.date_parser import parse_date, parse_optional_date

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def describe_schedule(rule: RecurringRule) -> str:
    """Return a short human-readable schedule, e.g. 'monthly on day 15'."""
    if rule.frequency in ("weekly", "biweekly"):
        return f"{rule.frequency} on {WEEKDAY_NAMES[rule.day_of_week]}"
    if rule.frequency == "yearly":
        return f"yearly on {calendar.month_abbr[rule.month_of_year]} {rule.day_of_month}"
    return f"monthly on day {rule.day_of_month}"


def rule_options(required: bool):
    """Shared options for create/update. Update makes every option optional."""

    def decorator(func):
        options = [
            click.option("--type", "rule_type", type=click.Choice(TRANSACTION_TYPES), required=required,
                         help="Transaction type"),
            click.option("--amount", required=required, help="Positive amount (e.g., 9.99)"),
            click.option("--frequency", type=click.Choice(FREQUENCIES), required=required, help="How often the rule fires"),
            click.option("--start-date", help="First date the rule may fire (default: today)"),
            click.option("--end-date", help="Last date the rule may fire, inclusive"),
            click.option("--day-of-month", type=int, help="Day 1-31 (monthly/yearly; clamped in short months)"),
            click.option("--day-of-week", type=int, help="Day 0-6, Sunday=0 (weekly/biweekly)"),
            click.option("--month", "month_of_year", type=int, help="Month 1-12 (yearly)"),
            click.option("--account", help="Account name or ID (defaults to the main account)"),
            click.option("--to-account", help="Destination account name or ID (transfers only)"),
            click.option("--category", help="Category (required unless transfer)"),
            click.option("--description", help="Description copied to generated transactions"),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


def _parse_amount_or_exit(ctx: click.Context, amount: str):
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


@click.group()
def recurring_group():
    """Manage recurring rules and generate their transactions."""
    pass


@recurring_group.command("create")
@rule_options(required=True)
@click.pass_context
def create_rule(
    ctx,
    rule_type: str,
    amount: str,
    frequency: str,
    start_date: str | None,
    end_date: str | None,
    day_of_month: int | None,
    day_of_week: int | None,
    month_of_year: int | None,
    account: str | None,
    to_account: str | None,
    category: str | None,
    description: str | None,
):
    """Create a recurring rule.

    Examples:
        ledgerly recurring create --type expense --amount 9.99 --frequency monthly \\
            --day-of-month 15 --category subscriptions --description "Streaming"
        ledgerly recurring create --type income --amount 1200 --frequency biweekly \\
            --day-of-week 5 --category salary --start-date 2024-01-05
    """
    db = ctx.obj["db"]
    service = RecurringRuleService(db)
    account_service = AccountService(db)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)
    dest_account_id = resolve_optional_account_or_exit(ctx, account_service, to_account)
    rule_amount = _parse_amount_or_exit(ctx, amount)

    try:
        start = parse_date(start_date) if start_date else parse_date("today")
        end = parse_optional_date(end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        rule_id = service.create_rule(
            amount=rule_amount,
            type=rule_type,
            frequency=frequency,
            start_date=start,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category or "",
            description=description or "",
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            end_date=end,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    rule = service.require_rule(rule_id)
    click.echo(f"Created recurring rule {rule_id}: {describe_schedule(rule)} from {rule.start_date}")


@recurring_group.command("list")
@click.option("--active", "active_only", is_flag=True, help="Show only active rules")
@click.pass_context
def list_rules(ctx, active_only: bool):
    """List recurring rules."""
    db = ctx.obj["db"]
    service = RecurringRuleService(db)

    rules = service.list_rules(active_only=active_only)
    if not rules:
        click.echo("No recurring rules found.")
        return

    click.echo(f"\nFound {len(rules)} recurring rule(s):")
    click.echo("-" * 120)
    click.echo(
        f"{'ID':<5} {'Schedule':<24} {'Type':<9} {'Amount':>10}  {'Category':<18} "
        f"{'Start':<11} {'End':<11} {'Last run':<11} {'Active':<6}"
    )
    click.echo("-" * 120)
    for rule in rules:
        click.echo(
            f"{rule.id:<5} {describe_schedule(rule):<24} {rule.type:<9} {rule.amount:>10,.2f}  "
            f"{rule.category[:18]:<18} {str(rule.start_date):<11} {str(rule.end_date or ''):<11} "
            f"{str(rule.last_generated or ''):<11} {'yes' if rule.is_active else 'no':<6}"
        )


@recurring_group.command("update")
@click.argument("rule_id", type=int)
@rule_options(required=False)
@click.option("--no-end-date", is_flag=True, help="Remove the end date")
@click.pass_context
def update_rule(
    ctx,
    rule_id: int,
    rule_type: str | None,
    amount: str | None,
    frequency: str | None,
    start_date: str | None,
    end_date: str | None,
    day_of_month: int | None,
    day_of_week: int | None,
    month_of_year: int | None,
    account: str | None,
    to_account: str | None,
    category: str | None,
    description: str | None,
    no_end_date: bool,
):
    """Update a recurring rule.

    Only the provided fields change. Schedule fields that don't fit a new
    frequency are dropped. Dates already generated are never generated again.

    Examples:
        ledgerly recurring update 3 --amount 12.99
        ledgerly recurring update 3 --frequency weekly --day-of-week 1
    """
    db = ctx.obj["db"]
    service = RecurringRuleService(db)
    account_service = AccountService(db)

    try:
        rule = service.require_rule(rule_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)
    dest_account_id = resolve_optional_account_or_exit(ctx, account_service, to_account)

    try:
        start = parse_optional_date(start_date) or rule.start_date
        end = None if no_end_date else (parse_optional_date(end_date) or rule.end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    new_type = rule_type or rule.type
    new_frequency = frequency or rule.frequency
    weekly = new_frequency in ("weekly", "biweekly")

    if day_of_month is None and not weekly:
        day_of_month = rule.day_of_month
    if day_of_week is None and weekly:
        day_of_week = rule.day_of_week
    if month_of_year is None and new_frequency == "yearly":
        month_of_year = rule.month_of_year
    if dest_account_id is None and new_type == "transfer":
        dest_account_id = rule.dest_account_id

    try:
        service.update_rule(
            rule_id=rule_id,
            amount=_parse_amount_or_exit(ctx, amount) if amount is not None else rule.amount,
            type=new_type,
            frequency=new_frequency,
            start_date=start,
            account_id=account_id if account_id is not None else rule.account_id,
            dest_account_id=dest_account_id if new_type == "transfer" else None,
            category=category if category is not None else rule.category,
            description=description if description is not None else rule.description,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            end_date=end,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated recurring rule {rule_id}")


@recurring_group.command("deactivate")
@click.argument("rule_id", type=int)
@click.pass_context
def deactivate_rule(ctx, rule_id: int):
    """Stop a rule from generating new transactions.

    Transactions it already generated are kept.
    """
    db = ctx.obj["db"]
    service = RecurringRuleService(db)

    try:
        service.deactivate_rule(rule_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deactivated recurring rule {rule_id}")


@recurring_group.command("delete")
@click.argument("rule_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_rule(ctx, rule_id: int, yes: bool):
    """Delete a recurring rule.

    Transactions it already generated are kept and remain editable.
    """
    db = ctx.obj["db"]
    service = RecurringRuleService(db)

    if service.get_rule(rule_id) is None:
        click.echo(f"Error: Recurring rule {rule_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete recurring rule {rule_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_rule(rule_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted recurring rule {rule_id}")


@recurring_group.command("instances")
@click.argument("rule_id", type=int)
@click.pass_context
def list_instances(ctx, rule_id: int):
    """List the transactions generated from a rule."""
    db = ctx.obj["db"]
    service = RecurringRuleService(db)
    account_service = AccountService(db)

    transactions = service.list_instances(rule_id)
    if not transactions:
        click.echo("No transactions found.")
        return

    accounts = {acc.id: acc.name for acc in account_service.list_accounts()}
    echo_transactions(transactions, accounts)


@recurring_group.command("generate")
@click.option("--today", "today_str", help="Generate through this date instead of today (YYYY-MM-DD)")
@click.pass_context
def generate(ctx, today_str: str | None):
    """Generate pending transactions for all active rules.

    Safe to run any number of times: each rule and date is generated once.
    """
    db = ctx.obj["db"]
    generator = RecurringGenerator(db)

    today = None
    if today_str:
        try:
            today = parse_date(today_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        count = generator.generate(today=today)
    except (ValueError, SQLAlchemyError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Generated {count} recurring transaction(s)")


def register_commands(cli):
    """Register recurring commands with main CLI."""
    cli.add_command(recurring_group, name="recurring")
