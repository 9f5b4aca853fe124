"""
Ledger Data Types

Immutable value objects for the identifiers and keys the token facade works
with, plus the parsing of their textual forms.

All validation happens at construction time via Pydantic. Parsing failures
are reported as ParseError; private key material is never part of a repr or
of an error message.
"""

import re
from enum import Enum
from typing import ClassVar

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import InvalidArgumentError, ParseError


# ============================================================================
# Constants
# ============================================================================

# shard.realm.num with an optional "-abcde" network checksum
ENTITY_ID_PATTERN = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)(?:-[a-z]{5})?$")

KEY_LENGTH = 32

# DER prefixes emitted by the Hiero SDKs for raw 32-byte keys
ED25519_DER_PREFIX = bytes.fromhex("302e020100300506032b657004220420")
ECDSA_SECP256K1_DER_PREFIX = bytes.fromhex("3030020100300706052b8104000a04220420")

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


# ============================================================================
# Entity identifiers
# ============================================================================


class EntityId(BaseModel):
    """
    Ledger entity identifier in ``shard.realm.num`` form (Value Object)

    Subclasses name the kind of entity; an AccountId never equals a TokenId
    even when the numbers match.
    """

    kind: ClassVar[str] = "entity id"

    shard: int = Field(ge=0)
    realm: int = Field(ge=0)
    num: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def from_string(cls, value: str):
        """
        Parse an identifier such as ``"0.0.1234"`` or ``"0.0.1234-vfmkw"``

        The checksum suffix is accepted but not verified, since verification
        needs the ledger id of the target network.

        Raises:
            ParseError: If the text is not a valid identifier
        """
        if not isinstance(value, str):
            raise ParseError(cls.kind, repr(value), "expected a string")

        match = ENTITY_ID_PATTERN.match(value.strip())
        if not match:
            raise ParseError(cls.kind, value, "expected shard.realm.num")

        shard, realm, num = (int(part) for part in match.groups())
        return cls(shard=shard, realm=realm, num=num)

    def __str__(self) -> str:
        return f"{self.shard}.{self.realm}.{self.num}"


class AccountId(EntityId):
    """Identifier of a ledger account"""

    kind: ClassVar[str] = "account id"


class TokenId(EntityId):
    """Identifier of a token, produced by token creation"""

    kind: ClassVar[str] = "token id"


# ============================================================================
# Keys
# ============================================================================


class KeyAlgorithm(str, Enum):
    """Signature algorithms supported by the ledger"""

    ED25519 = "ED25519"
    ECDSA_SECP256K1 = "ECDSA_SECP256K1"


class PrivateKey(BaseModel):
    """
    Private key material (Value Object)

    Holds the algorithm and the 32 raw key bytes. The raw bytes are excluded
    from repr/str so that keys cannot end up in logs by accident.
    """

    algorithm: KeyAlgorithm
    raw: bytes = Field(repr=False, min_length=KEY_LENGTH, max_length=KEY_LENGTH)

    model_config = ConfigDict(frozen=True, strict=True, hide_input_in_errors=True)

    @model_validator(mode="after")
    def validate_key_material(self) -> "PrivateKey":
        if self.algorithm is KeyAlgorithm.ECDSA_SECP256K1:
            scalar = int.from_bytes(self.raw, "big")
            if not 0 < scalar < SECP256K1_ORDER:
                raise ValueError("secp256k1 scalar out of range")
        return self

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, algorithm: KeyAlgorithm, raw: bytes) -> "PrivateKey":
        """
        Build a key from raw bytes, reporting bad material as ParseError

        The pydantic ValidationError is dropped since it echoes its input.
        """
        try:
            return cls(algorithm=algorithm, raw=raw)
        except ValidationError:
            raise ParseError("private key", reason=f"invalid {algorithm.value} key material") from None

    @classmethod
    def generate(cls, algorithm: KeyAlgorithm = KeyAlgorithm.ED25519) -> "PrivateKey":
        """Generate a fresh random key"""
        if algorithm is KeyAlgorithm.ED25519:
            key = ed25519.Ed25519PrivateKey.generate()
            raw = key.private_bytes(
                serialization.Encoding.Raw,
                serialization.PrivateFormat.Raw,
                serialization.NoEncryption(),
            )
        else:
            key = ec.generate_private_key(ec.SECP256K1())
            raw = key.private_numbers().private_value.to_bytes(KEY_LENGTH, "big")
        return cls.of(algorithm, raw)

    @classmethod
    def from_string(cls, value: str) -> "PrivateKey":
        """
        Parse a hex encoded private key

        Accepted forms:
            - DER encoded Ed25519 or ECDSA secp256k1 key (Hiero SDK format)
            - any PKCS#8 DER key holding one of those algorithms
            - 32 raw bytes, interpreted as Ed25519

        An optional ``0x`` prefix is ignored.

        Raises:
            ParseError: If the text cannot be decoded into a supported key
        """
        return cls.from_bytes(_decode_hex(value))

    @classmethod
    def from_string_ecdsa(cls, value: str) -> "PrivateKey":
        """Parse a hex key, interpreting 32 raw bytes as ECDSA secp256k1"""
        data = _decode_hex(value)
        if len(data) == KEY_LENGTH:
            return cls.of(KeyAlgorithm.ECDSA_SECP256K1, data)
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PrivateKey":
        """Decode raw or DER encoded key bytes, see from_string"""
        if len(data) == KEY_LENGTH:
            return cls.of(KeyAlgorithm.ED25519, data)

        if data.startswith(ED25519_DER_PREFIX) and len(data) == len(ED25519_DER_PREFIX) + KEY_LENGTH:
            return cls.of(KeyAlgorithm.ED25519, data[len(ED25519_DER_PREFIX) :])

        if (
            data.startswith(ECDSA_SECP256K1_DER_PREFIX)
            and len(data) == len(ECDSA_SECP256K1_DER_PREFIX) + KEY_LENGTH
        ):
            return cls.of(KeyAlgorithm.ECDSA_SECP256K1, data[len(ECDSA_SECP256K1_DER_PREFIX) :])

        return cls._from_pkcs8(data)

    @classmethod
    def _from_pkcs8(cls, data: bytes) -> "PrivateKey":
        try:
            key = serialization.load_der_private_key(data, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm):
            raise ParseError("private key", reason="unrecognized key encoding") from None

        if isinstance(key, ed25519.Ed25519PrivateKey):
            raw = key.private_bytes(
                serialization.Encoding.Raw,
                serialization.PrivateFormat.Raw,
                serialization.NoEncryption(),
            )
            return cls.of(KeyAlgorithm.ED25519, raw)

        if isinstance(key, ec.EllipticCurvePrivateKey) and isinstance(key.curve, ec.SECP256K1):
            raw = key.private_numbers().private_value.to_bytes(KEY_LENGTH, "big")
            return cls.of(KeyAlgorithm.ECDSA_SECP256K1, raw)

        raise ParseError("private key", reason="unsupported key algorithm")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_cryptography_key(self) -> ed25519.Ed25519PrivateKey | ec.EllipticCurvePrivateKey:
        """Return the equivalent ``cryptography`` private key object"""
        if self.algorithm is KeyAlgorithm.ED25519:
            return ed25519.Ed25519PrivateKey.from_private_bytes(self.raw)
        return ec.derive_private_key(int.from_bytes(self.raw, "big"), ec.SECP256K1())

    def public_key_hex(self) -> str:
        """Raw Ed25519 public key, or compressed secp256k1 point, as hex"""
        public_key = self.to_cryptography_key().public_key()
        if self.algorithm is KeyAlgorithm.ED25519:
            data = public_key.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
        else:
            data = public_key.public_bytes(serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint)
        return data.hex()

    def to_string_der(self) -> str:
        """DER hex encoding in the Hiero SDK format, accepted by from_string"""
        prefix = ED25519_DER_PREFIX if self.algorithm is KeyAlgorithm.ED25519 else ECDSA_SECP256K1_DER_PREFIX
        return (prefix + self.raw).hex()


def _decode_hex(value: str) -> bytes:
    if not isinstance(value, str):
        raise ParseError("private key", reason="expected a string")

    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise ParseError("private key", reason="not a hex string") from None


# ============================================================================
# Account
# ============================================================================


class Account(BaseModel):
    """
    Account identifier paired with the private key that controls it

    Used both for explicit operation arguments and for the operator account
    a FungibleTokenClient is bound to.
    """

    account_id: AccountId
    private_key: PrivateKey

    model_config = ConfigDict(frozen=True, strict=True, hide_input_in_errors=True)

    @classmethod
    def of(cls, account_id: AccountId | str, private_key: PrivateKey | str) -> "Account":
        """
        Create an account from typed or textual values

        Raises:
            InvalidArgumentError: If a value is neither typed nor a string
            ParseError: If a textual value cannot be parsed
        """
        if isinstance(account_id, str):
            account_id = AccountId.from_string(account_id)
        elif not isinstance(account_id, AccountId):
            raise InvalidArgumentError(f"account_id must be an AccountId or str, got {type(account_id).__name__}")

        if isinstance(private_key, str):
            private_key = PrivateKey.from_string(private_key)
        elif not isinstance(private_key, PrivateKey):
            raise InvalidArgumentError(f"private_key must be a PrivateKey or str, got {type(private_key).__name__}")

        return cls(account_id=account_id, private_key=private_key)

    def __str__(self) -> str:
        return f"Account({self.account_id})"
