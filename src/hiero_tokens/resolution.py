"""
Argument Resolution

Helpers that turn the loose arguments accepted by the token facade into the
typed values the canonical operations require.

Each helper first checks presence, then parses textual input, and only then
applies a default. Nothing here talks to the ledger.
"""

from collections.abc import Iterable

from .data import Account, AccountId, PrivateKey, TokenId
from .errors import InvalidArgumentError
from .protocol import MAX_AMOUNT


AccountIdLike = AccountId | str
TokenIdLike = TokenId | str
PrivateKeyLike = PrivateKey | str


def require_text(value: str, name: str) -> str:
    """Require a non-empty string argument"""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def to_account_id(value: AccountIdLike, name: str = "account_id") -> AccountId:
    """Return ``value`` as AccountId, parsing it if it is a string"""
    if isinstance(value, AccountId):
        return value
    if isinstance(value, str):
        return AccountId.from_string(require_text(value, name))
    raise _wrong_type(value, name, "an AccountId or str")


def to_token_id(value: TokenIdLike, name: str = "token_id") -> TokenId:
    """Return ``value`` as TokenId, parsing it if it is a string"""
    if isinstance(value, TokenId):
        return value
    if isinstance(value, str):
        return TokenId.from_string(require_text(value, name))
    raise _wrong_type(value, name, "a TokenId or str")


def to_private_key(value: PrivateKeyLike, name: str = "private_key") -> PrivateKey:
    """Return ``value`` as PrivateKey, parsing it if it is a string"""
    if isinstance(value, PrivateKey):
        return value
    if isinstance(value, str):
        return PrivateKey.from_string(require_text(value, name))
    raise _wrong_type(value, name, "a PrivateKey or str")


def to_token_ids(value: TokenIdLike | Iterable[TokenIdLike], name: str = "token_ids") -> tuple[TokenId, ...]:
    """
    Return one or many token ids as a non-empty tuple

    A single TokenId or string is treated as a one-element collection.

    Raises:
        InvalidArgumentError: If value is None or an empty collection
        ParseError: If one of the strings is not a valid token id
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(value, (TokenId, str)):
        return (to_token_id(value, name),)
    if not isinstance(value, Iterable):
        raise _wrong_type(value, name, "a TokenId, str or an iterable of them")

    token_ids = tuple(to_token_id(item, f"{name}[{index}]") for index, item in enumerate(value))
    if not token_ids:
        raise InvalidArgumentError(f"{name} must not be empty")
    return token_ids


def require_amount(value: int, name: str = "amount") -> int:
    """Require a non-negative amount that fits a ledger int64"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative")
    if value > MAX_AMOUNT:
        raise InvalidArgumentError(f"{name} exceeds the maximum ledger amount")
    return value


def resolve_key(value: PrivateKeyLike | None, default: PrivateKey, name: str) -> PrivateKey:
    """Parse ``value`` if given, otherwise fall back to ``default``"""
    if value is None:
        return default
    return to_private_key(value, name)


def resolve_account(
    account: Account | None,
    account_id: AccountIdLike | None,
    account_key: PrivateKeyLike | None,
    name: str,
    default: Account | None = None,
    id_name: str | None = None,
    key_name: str | None = None,
) -> tuple[AccountId, PrivateKey]:
    """
    Resolve an account given either as Account or as id plus key

    Args:
        account: Account object, exclusive with account_id/account_key
        account_id: Account id, requires account_key
        account_key: Key of account_id, requires account_id
        name: Argument name used in error messages
        default: Account used when nothing is given; None makes the account required
        id_name: Name of the id argument, defaults to "<name>_id"
        key_name: Name of the key argument, defaults to "<name>_key"

    Returns:
        Tuple of (account id, private key)

    Raises:
        InvalidArgumentError: If the arguments are missing, incomplete or conflicting
        ParseError: If a textual id or key cannot be parsed
    """
    id_name = id_name or f"{name}_id"
    key_name = key_name or f"{name}_key"
    has_parts = account_id is not None or account_key is not None

    if account is not None:
        if has_parts:
            raise InvalidArgumentError(f"Pass either {name} or {id_name}/{key_name}, not both")
        if not isinstance(account, Account):
            raise _wrong_type(account, name, "an Account")
        return account.account_id, account.private_key

    if has_parts:
        if account_id is None:
            raise InvalidArgumentError(f"{id_name} must not be None when {key_name} is given")
        if account_key is None:
            raise InvalidArgumentError(f"{key_name} must not be None when {id_name} is given")
        return to_account_id(account_id, id_name), to_private_key(account_key, key_name)

    if default is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return default.account_id, default.private_key


def _wrong_type(value, name: str, expected: str) -> InvalidArgumentError:
    if value is None:
        return InvalidArgumentError(f"{name} must not be None")
    return InvalidArgumentError(f"{name} must be {expected}, got {type(value).__name__}")
