"""CLI error handling helpers."""

import click
from sqlalchemy.exc import SQLAlchemyError

from ledgerly.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError | SQLAlchemyError) -> None:
    """Render a domain or storage error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
