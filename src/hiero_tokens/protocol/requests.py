"""
Protocol Requests

Immutable descriptors of the ledger transactions the token facade submits.

Requests are only ever built from typed identifiers and keys: strict
validation rejects strings, None and other loose input, so a request that
exists is fully resolved.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..data import AccountId, PrivateKey, TokenId


# Ledger amounts are signed 64-bit integers
MAX_AMOUNT = 2**63 - 1


class TokenType(str, Enum):
    """Token types known to the ledger"""

    FUNGIBLE_COMMON = "FUNGIBLE_COMMON"
    NON_FUNGIBLE_UNIQUE = "NON_FUNGIBLE_UNIQUE"


class ProtocolRequest(BaseModel):
    """Base class for all protocol layer requests"""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")


class TokenCreateRequest(ProtocolRequest):
    """Create a token whose supply is held by the treasury account"""

    name: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    treasury_account_id: AccountId
    treasury_key: PrivateKey
    token_type: TokenType
    supply_key: PrivateKey


class TokenAssociateRequest(ProtocolRequest):
    """Allow an account to hold balances of the given tokens"""

    token_ids: tuple[TokenId, ...] = Field(min_length=1)
    account_id: AccountId
    account_key: PrivateKey


class TokenDissociateRequest(ProtocolRequest):
    """Remove an account's ability to hold balances of the given tokens"""

    token_ids: tuple[TokenId, ...] = Field(min_length=1)
    account_id: AccountId
    account_key: PrivateKey


class TokenMintRequest(ProtocolRequest):
    """Mint ``amount`` units of a fungible token, signed by its supply key"""

    token_id: TokenId
    supply_key: PrivateKey
    amount: int = Field(ge=0, le=MAX_AMOUNT)


class TokenBurnRequest(ProtocolRequest):
    """Burn ``amount`` units of a fungible token from its treasury"""

    token_id: TokenId
    supply_key: PrivateKey
    amount: int = Field(ge=0, le=MAX_AMOUNT)


class TokenTransferRequest(ProtocolRequest):
    """Move ``amount`` units of a token from sender to receiver"""

    token_id: TokenId
    sender_account_id: AccountId
    sender_key: PrivateKey
    receiver_account_id: AccountId
    amount: int = Field(ge=0, le=MAX_AMOUNT)
