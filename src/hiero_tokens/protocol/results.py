"""
Protocol Results

Value objects returned by a protocol layer client once a transaction has
reached consensus and succeeded. A failed transaction never produces a
result: the client raises HieroException instead.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..data import TokenId


class TransactionResult(BaseModel):
    """Result shared by every executed transaction"""

    transaction_id: str = Field(description="Ledger transaction id, e.g. 0.0.2@1712345678.000000001")

    model_config = ConfigDict(frozen=True, extra="forbid")


class TokenCreateResult(TransactionResult):
    """Result of a token creation"""

    token_id: TokenId


class TokenAssociateResult(TransactionResult):
    """Result of a token association"""

    pass


class TokenDissociateResult(TransactionResult):
    """Result of a token dissociation"""

    pass


class TokenMintResult(TransactionResult):
    """Result of a mint, with the token's total supply afterwards"""

    total_supply: int = Field(ge=0)


class TokenBurnResult(TransactionResult):
    """Result of a burn, with the token's total supply afterwards"""

    total_supply: int = Field(ge=0)


class TokenTransferResult(TransactionResult):
    """Result of a token transfer"""

    pass
