"""
Hiero Fungible Tokens

Facade over a Hiero ledger's token service: create, associate, dissociate,
mint, burn and transfer fungible tokens with an operator account supplying
the defaults. Ledger access goes through a ProtocolLayerClient.
"""

from .canonicalizer import TokenRequestCanonicalizer
from .config import HieroSettings, configure_logging
from .data import Account, AccountId, KeyAlgorithm, PrivateKey, TokenId
from .errors import HieroError, HieroException, InvalidArgumentError, ParseError
from .fungible import FungibleTokenClient
from .protocol import ProtocolLayerClient


__all__ = [
    "Account",
    "AccountId",
    "FungibleTokenClient",
    "HieroError",
    "HieroException",
    "HieroSettings",
    "InvalidArgumentError",
    "KeyAlgorithm",
    "ParseError",
    "PrivateKey",
    "ProtocolLayerClient",
    "TokenId",
    "TokenRequestCanonicalizer",
    "configure_logging",
]
