"""
Protocol Layer

Request and result types exchanged with the ledger, and the client
interface that executes them.
"""

from .client import ProtocolLayerClient
from .requests import (
    MAX_AMOUNT,
    ProtocolRequest,
    TokenAssociateRequest,
    TokenBurnRequest,
    TokenCreateRequest,
    TokenDissociateRequest,
    TokenMintRequest,
    TokenTransferRequest,
    TokenType,
)
from .results import (
    TokenAssociateResult,
    TokenBurnResult,
    TokenCreateResult,
    TokenDissociateResult,
    TokenMintResult,
    TokenTransferResult,
    TransactionResult,
)


__all__ = [
    "MAX_AMOUNT",
    "ProtocolLayerClient",
    "ProtocolRequest",
    "TokenAssociateRequest",
    "TokenAssociateResult",
    "TokenBurnRequest",
    "TokenBurnResult",
    "TokenCreateRequest",
    "TokenCreateResult",
    "TokenDissociateRequest",
    "TokenDissociateResult",
    "TokenMintRequest",
    "TokenMintResult",
    "TokenTransferRequest",
    "TokenTransferResult",
    "TokenType",
    "TransactionResult",
]
