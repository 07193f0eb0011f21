"""
Maps raw account addresses to Account entities, which are created on first sight.

Resolving an account is split into 2 steps, which lets the caller decide whether a new account is persisted:

1. `build_account()` looks up the account, or constructs a new one without writing it
2. `commit_account()` writes it
"""
from artgraph.data.account import TAccount
from artgraph.data.store import EntityStore
from artgraph.ethereum.model import Address, to_address


def build_account(store: EntityStore, address: Address | str | bytes) -> tuple[TAccount, bool]:
    """
    :return: (account, created) - `created` is True if the account was constructed and is not yet persisted
    """
    account_id = to_address(address)
    account = store.load(TAccount, account_id)
    if account is None:
        return TAccount.create(account_id), True
    return account, False


def commit_account(store: EntityStore, account: TAccount) -> TAccount:
    return store.save(account)


def resolve_account(store: EntityStore, address: Address | str | bytes) -> TAccount:
    """
    Returns the existing account, or creates and persists a new one
    """
    account, created = build_account(store, address)
    if created:
        account = commit_account(store, account)
    return account
