"""Utility for resolving account names to IDs."""

from ledgerly.domain.account import AccountService
from ledgerly.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve account name or ID to account ID.

    Args:
        account_service: AccountService instance
        account: Account name (str) or ID (int or string representation of int)

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    if isinstance(account, int):
        account_id = account
    elif account.strip().isdigit():
        account_id = int(account)
    else:
        for acc in account_service.list_accounts():
            if acc.name == account:
                return acc.id
        raise NotFoundError(f"Account '{account}' not found")

    if not account_service.account_exists(account_id):
        raise NotFoundError(f"Account ID {account_id} not found")
    return account_id
