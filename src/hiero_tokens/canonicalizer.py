"""
Token Request Canonicalizer

Builds one immutable protocol request per fungible token operation and hands
it to the protocol layer client.

Every method takes fully resolved, typed arguments: no defaults are applied
here and textual ids or keys are rejected. Each call executes exactly one
transaction; errors raised by the protocol layer propagate unchanged.
"""

import logging
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from .data import AccountId, PrivateKey, TokenId
from .errors import InvalidArgumentError
from .protocol import (
    ProtocolLayerClient,
    ProtocolRequest,
    TokenAssociateRequest,
    TokenBurnRequest,
    TokenCreateRequest,
    TokenDissociateRequest,
    TokenMintRequest,
    TokenTransferRequest,
    TokenType,
)


logger = logging.getLogger(__name__)


def build_request(request_type: type[ProtocolRequest], **fields) -> ProtocolRequest:
    """
    Construct a request, reporting invalid fields as InvalidArgumentError

    Input values are left out of the error message since they may hold keys.
    """
    try:
        return request_type(**fields)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors(include_url=False, include_input=False)
        )
        raise InvalidArgumentError(f"Invalid {request_type.__name__}: {problems}") from None


class TokenRequestCanonicalizer:
    """Executes canonical fungible token operations through a protocol layer client"""

    def __init__(self, client: ProtocolLayerClient):
        if client is None:
            raise InvalidArgumentError("client must not be None")
        self.client = client

    def create_token(
        self,
        name: str,
        symbol: str,
        treasury_account_id: AccountId,
        treasury_key: PrivateKey,
        supply_key: PrivateKey,
    ) -> TokenId:
        """
        Create a fungible token

        Args:
            name: Token name
            symbol: Token symbol
            treasury_account_id: Account that receives the minted supply
            treasury_key: Key of the treasury account
            supply_key: Key allowed to mint and burn the token

        Returns:
            Id of the new token
        """
        request = build_request(
            TokenCreateRequest,
            name=name,
            symbol=symbol,
            treasury_account_id=treasury_account_id,
            treasury_key=treasury_key,
            token_type=TokenType.FUNGIBLE_COMMON,
            supply_key=supply_key,
        )
        logger.debug(f"Creating token '{symbol}' with treasury {treasury_account_id}")
        result = self.client.execute_token_create_transaction(request)
        logger.info(f"Created token {result.token_id} ('{symbol}') in transaction {result.transaction_id}")
        return result.token_id

    def associate_token(
        self, token_ids: Sequence[TokenId], account_id: AccountId, account_key: PrivateKey
    ) -> None:
        """Associate one or more tokens with an account"""
        request = build_request(
            TokenAssociateRequest,
            token_ids=_as_tuple(token_ids),
            account_id=account_id,
            account_key=account_key,
        )
        logger.debug(f"Associating {_format_ids(request.token_ids)} with account {account_id}")
        result = self.client.execute_token_associate_transaction(request)
        logger.info(
            f"Associated {_format_ids(request.token_ids)} with account {account_id} "
            f"in transaction {result.transaction_id}"
        )

    def dissociate_token(
        self, token_ids: Sequence[TokenId], account_id: AccountId, account_key: PrivateKey
    ) -> None:
        """Dissociate one or more tokens from an account"""
        request = build_request(
            TokenDissociateRequest,
            token_ids=_as_tuple(token_ids),
            account_id=account_id,
            account_key=account_key,
        )
        logger.debug(f"Dissociating {_format_ids(request.token_ids)} from account {account_id}")
        result = self.client.execute_token_dissociate_transaction(request)
        logger.info(
            f"Dissociated {_format_ids(request.token_ids)} from account {account_id} "
            f"in transaction {result.transaction_id}"
        )

    def mint_token(self, token_id: TokenId, supply_key: PrivateKey, amount: int) -> int:
        """
        Mint tokens

        Returns:
            Total supply of the token after minting
        """
        request = build_request(TokenMintRequest, token_id=token_id, supply_key=supply_key, amount=amount)
        logger.debug(f"Minting {amount} of token {token_id}")
        result = self.client.execute_mint_token_transaction(request)
        logger.info(f"Minted {amount} of token {token_id}, total supply {result.total_supply}")
        return result.total_supply

    def burn_token(self, token_id: TokenId, amount: int, supply_key: PrivateKey) -> int:
        """
        Burn tokens

        Returns:
            Total supply of the token after burning
        """
        request = build_request(TokenBurnRequest, token_id=token_id, supply_key=supply_key, amount=amount)
        logger.debug(f"Burning {amount} of token {token_id}")
        result = self.client.execute_burn_token_transaction(request)
        logger.info(f"Burned {amount} of token {token_id}, total supply {result.total_supply}")
        return result.total_supply

    def transfer_token(
        self,
        token_id: TokenId,
        from_account_id: AccountId,
        from_account_key: PrivateKey,
        to_account_id: AccountId,
        amount: int,
    ) -> None:
        """Transfer tokens from one account to another"""
        request = build_request(
            TokenTransferRequest,
            token_id=token_id,
            sender_account_id=from_account_id,
            sender_key=from_account_key,
            receiver_account_id=to_account_id,
            amount=amount,
        )
        logger.debug(f"Transferring {amount} of token {token_id} from {from_account_id} to {to_account_id}")
        result = self.client.execute_transfer_transaction(request)
        logger.info(
            f"Transferred {amount} of token {token_id} to {to_account_id} in transaction {result.transaction_id}"
        )


def _format_ids(token_ids: Sequence[TokenId]) -> str:
    return ", ".join(str(token_id) for token_id in token_ids)


def _as_tuple(token_ids: Sequence[TokenId]) -> tuple:
    if token_ids is None or isinstance(token_ids, (str, TokenId)) or not isinstance(token_ids, Iterable):
        raise InvalidArgumentError("token_ids must be a sequence of TokenId")
    return tuple(token_ids)
