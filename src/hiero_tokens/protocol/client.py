"""
Protocol Layer Client

Capability interface the token facade uses to reach the ledger.

Implementations submit the transaction described by a request, wait for its
receipt and return the matching result. Any failure is raised as
HieroException carrying the underlying cause. Retries, timeouts and fees are
the implementation's concern.
"""

from typing import Protocol, runtime_checkable

from .requests import (
    TokenAssociateRequest,
    TokenBurnRequest,
    TokenCreateRequest,
    TokenDissociateRequest,
    TokenMintRequest,
    TokenTransferRequest,
)
from .results import (
    TokenAssociateResult,
    TokenBurnResult,
    TokenCreateResult,
    TokenDissociateResult,
    TokenMintResult,
    TokenTransferResult,
)


@runtime_checkable
class ProtocolLayerClient(Protocol):
    """Port for executing token transactions on the ledger"""

    def execute_token_create_transaction(self, request: TokenCreateRequest) -> TokenCreateResult:
        """Create a token and return its new id"""
        ...

    def execute_token_associate_transaction(self, request: TokenAssociateRequest) -> TokenAssociateResult:
        """Associate tokens with an account"""
        ...

    def execute_token_dissociate_transaction(self, request: TokenDissociateRequest) -> TokenDissociateResult:
        """Dissociate tokens from an account"""
        ...

    def execute_mint_token_transaction(self, request: TokenMintRequest) -> TokenMintResult:
        """Mint tokens and return the new total supply"""
        ...

    def execute_burn_token_transaction(self, request: TokenBurnRequest) -> TokenBurnResult:
        """Burn tokens and return the new total supply"""
        ...

    def execute_transfer_transaction(self, request: TokenTransferRequest) -> TokenTransferResult:
        """Transfer tokens between two accounts"""
        ...
