"""
Fungible Token Client

Facade for the fungible token lifecycle: create, associate, dissociate,
mint, burn and transfer.

Accounts, ids and keys can be passed as typed values or as strings, and the
treasury, supply key and sender can be left out in favour of the operator
account the client is bound to. Every call is resolved to one canonical
operation of TokenRequestCanonicalizer.
"""

import logging
from collections.abc import Iterable

from .canonicalizer import TokenRequestCanonicalizer
from .config import HieroSettings
from .data import Account, TokenId
from .errors import InvalidArgumentError
from .protocol import ProtocolLayerClient
from .resolution import (
    AccountIdLike,
    PrivateKeyLike,
    TokenIdLike,
    require_amount,
    require_text,
    resolve_account,
    resolve_key,
    to_account_id as _to_account_id,
    to_token_id,
    to_token_ids,
)


logger = logging.getLogger(__name__)


class FungibleTokenClient:
    """
    Fungible token operations on behalf of an operator account

    The operator account pays for transactions and, unless another account
    or key is given, acts as treasury, supply key holder and sender.

    Example:
        >>> client = FungibleTokenClient(protocol_client, operator)
        >>> token_id = client.create_token("Gold", "AU")
        >>> client.mint_token(token_id, 100)
        100
    """

    def __init__(self, client: ProtocolLayerClient, operator_account: Account):
        """
        Args:
            client: Protocol layer client executing the transactions
            operator_account: Default payer, treasury, supply key and sender
        """
        if client is None:
            raise InvalidArgumentError("client must not be None")
        if operator_account is None:
            raise InvalidArgumentError("operator_account must not be None")
        if not isinstance(operator_account, Account):
            raise InvalidArgumentError(
                f"operator_account must be an Account, got {type(operator_account).__name__}"
            )

        self._operator_account = operator_account
        self.canonical = TokenRequestCanonicalizer(client)

    @classmethod
    def from_settings(cls, client: ProtocolLayerClient, settings: HieroSettings | None = None) -> "FungibleTokenClient":
        """
        Create a client bound to the operator account from the settings

        Args:
            client: Protocol layer client executing the transactions
            settings: Loaded settings, read from the environment when None

        Raises:
            ParseError: If the configured operator id or key is malformed
        """
        if settings is None:
            settings = HieroSettings()  # type: ignore[call-arg]  # Pydantic settings loads from env

        operator_account = settings.get_operator_account()
        logger.info(f"Using operator {operator_account.account_id} on network {settings.network_name or 'default'}")
        return cls(client, operator_account)

    @property
    def operator_account(self) -> Account:
        """Account used when no treasury, supply key or sender is given"""
        return self._operator_account

    # ========================================================================
    # Create
    # ========================================================================

    def create_token(
        self,
        name: str,
        symbol: str,
        treasury_account: Account | None = None,
        *,
        treasury_account_id: AccountIdLike | None = None,
        treasury_key: PrivateKeyLike | None = None,
        supply_key: PrivateKeyLike | None = None,
    ) -> TokenId:
        """
        Create a fungible token

        Args:
            name: Token name
            symbol: Token symbol
            treasury_account: Treasury as Account (default: operator account)
            treasury_account_id: Treasury id, given together with treasury_key
            treasury_key: Treasury key, given together with treasury_account_id
            supply_key: Key allowed to mint and burn (default: operator key)

        Returns:
            Id of the new token

        Raises:
            InvalidArgumentError: Missing, empty or conflicting arguments
            ParseError: A textual id or key cannot be parsed
            HieroException: The ledger rejected the transaction
        """
        name = require_text(name, "name")
        symbol = require_text(symbol, "symbol")
        treasury_id, resolved_treasury_key = resolve_account(
            treasury_account,
            treasury_account_id,
            treasury_key,
            "treasury_account",
            default=self._operator_account,
            id_name="treasury_account_id",
            key_name="treasury_key",
        )
        resolved_supply_key = resolve_key(supply_key, self._operator_account.private_key, "supply_key")

        return self.canonical.create_token(name, symbol, treasury_id, resolved_treasury_key, resolved_supply_key)

    # ========================================================================
    # Associate / Dissociate
    # ========================================================================

    def associate_token(
        self,
        token_ids: TokenIdLike | Iterable[TokenIdLike],
        account: Account | None = None,
        *,
        account_id: AccountIdLike | None = None,
        account_key: PrivateKeyLike | None = None,
    ) -> None:
        """
        Associate one or more tokens with an account

        The account is required, either as Account or as account_id plus
        account_key; the operator account is never used implicitly.

        Raises:
            InvalidArgumentError: Missing account, or empty token_ids
            ParseError: A textual id or key cannot be parsed
            HieroException: The ledger rejected the transaction
        """
        resolved_ids = to_token_ids(token_ids)
        resolved_account_id, resolved_key = resolve_account(account, account_id, account_key, "account")

        self.canonical.associate_token(resolved_ids, resolved_account_id, resolved_key)

    def dissociate_token(
        self,
        token_ids: TokenIdLike | Iterable[TokenIdLike],
        account: Account | None = None,
        *,
        account_id: AccountIdLike | None = None,
        account_key: PrivateKeyLike | None = None,
    ) -> None:
        """
        Dissociate one or more tokens from an account

        Same argument rules as associate_token.
        """
        resolved_ids = to_token_ids(token_ids)
        resolved_account_id, resolved_key = resolve_account(account, account_id, account_key, "account")

        self.canonical.dissociate_token(resolved_ids, resolved_account_id, resolved_key)

    # ========================================================================
    # Mint / Burn
    # ========================================================================

    def mint_token(self, token_id: TokenIdLike, amount: int, *, supply_key: PrivateKeyLike | None = None) -> int:
        """
        Mint tokens into the token's treasury

        Args:
            token_id: Token to mint
            amount: Number of units to mint
            supply_key: Supply key of the token (default: operator key)

        Returns:
            Total supply after minting, as reported by the ledger
        """
        resolved_id = to_token_id(token_id)
        amount = require_amount(amount)
        resolved_key = resolve_key(supply_key, self._operator_account.private_key, "supply_key")

        return self.canonical.mint_token(resolved_id, resolved_key, amount)

    def burn_token(self, token_id: TokenIdLike, amount: int, *, supply_key: PrivateKeyLike | None = None) -> int:
        """
        Burn tokens from the token's treasury

        Args:
            token_id: Token to burn
            amount: Number of units to burn
            supply_key: Supply key of the token (default: operator key)

        Returns:
            Total supply after burning, as reported by the ledger
        """
        resolved_id = to_token_id(token_id)
        amount = require_amount(amount)
        resolved_key = resolve_key(supply_key, self._operator_account.private_key, "supply_key")

        return self.canonical.burn_token(resolved_id, amount, resolved_key)

    # ========================================================================
    # Transfer
    # ========================================================================

    def transfer_token(
        self,
        token_id: TokenIdLike,
        to_account_id: AccountIdLike,
        amount: int,
        *,
        from_account: Account | None = None,
        from_account_id: AccountIdLike | None = None,
        from_account_key: PrivateKeyLike | None = None,
    ) -> None:
        """
        Transfer tokens to another account

        Args:
            token_id: Token to transfer
            to_account_id: Receiving account
            amount: Number of units to transfer
            from_account: Sender as Account (default: operator account)
            from_account_id: Sender id, given together with from_account_key
            from_account_key: Sender key, given together with from_account_id
        """
        resolved_id = to_token_id(token_id)
        receiver_id = _to_account_id(to_account_id, "to_account_id")
        amount = require_amount(amount)
        sender_id, sender_key = resolve_account(
            from_account,
            from_account_id,
            from_account_key,
            "from_account",
            default=self._operator_account,
        )

        self.canonical.transfer_token(resolved_id, sender_id, sender_key, receiver_id, amount)
