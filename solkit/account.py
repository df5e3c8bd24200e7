"""Ed25519 accounts, public keys and base58 encoding."""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
)

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}

PUBLIC_KEY_LENGTH = 32
PRIVATE_KEY_LENGTH = 64
SEED_LENGTH = 32
SIGNATURE_LENGTH = 64


def b58encode(data: bytes) -> str:
    """Encode bytes with the bitcoin base58 alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    leading = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    return "1" * leading + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a base58 string; raise ValueError on bad input."""
    if not text:
        raise ValueError("zero length string")
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading + body


class AccountError(ValueError):
    """Base error for account construction."""


class Base58DecodeError(AccountError):
    """The key text is not valid base58."""


class HexDecodeError(AccountError):
    """The key text is not valid hex."""


class KeyLengthError(AccountError):
    """The key has the wrong length."""


@dataclass(frozen=True, order=True)
class PublicKey:
    """A 32-byte ed25519 public key."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Build a key from up to 32 bytes, left-padding shorter input with zeros."""
        data = bytes(data)
        if len(data) > PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"public key must be at most {PUBLIC_KEY_LENGTH} bytes, got {len(data)}"
            )
        return cls(data.rjust(PUBLIC_KEY_LENGTH, b"\x00"))

    @classmethod
    def from_base58(cls, text: str) -> PublicKey:
        return cls.from_bytes(b58decode(text))

    def to_base58(self) -> str:
        return b58encode(self.data)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Return whether signature is a valid signature of message by this key."""
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            Ed25519PublicKey.from_public_bytes(self.data).verify(
                bytes(signature), bytes(message)
            )
        except (InvalidSignature, ValueError):
            return False
        return True

    def is_zero(self) -> bool:
        return not any(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()


@dataclass(frozen=True)
class Account:
    """A keypair: the public key and the 64-byte private key (seed + public key)."""

    public_key: PublicKey
    private_key: bytes

    @classmethod
    def generate(cls) -> Account:
        """Create an account with a fresh random key."""
        seed = Ed25519PrivateKey.generate().private_bytes(
            Encoding.Raw, PrivateFormat.Raw, NoEncryption()
        )
        return cls.from_seed(seed)

    @classmethod
    def from_bytes(cls, key: bytes) -> Account:
        key = bytes(key)
        if len(key) != PRIVATE_KEY_LENGTH:
            raise KeyLengthError(
                f"key length mismatch, expected: {PRIVATE_KEY_LENGTH}, got: {len(key)}"
            )
        return cls(PublicKey(key[SEED_LENGTH:]), key)

    @classmethod
    def from_base58(cls, key: str) -> Account:
        try:
            raw = b58decode(key)
        except ValueError as exc:
            raise Base58DecodeError(f"failed to base58 decode, err: {exc}") from exc
        return cls.from_bytes(raw)

    @classmethod
    def from_hex(cls, key: str) -> Account:
        try:
            raw = binascii.unhexlify(key)
        except (binascii.Error, ValueError) as exc:
            raise HexDecodeError(f"failed to hex decode, err: {exc}") from exc
        return cls.from_bytes(raw)

    @classmethod
    def from_seed(cls, seed: bytes) -> Account:
        seed = bytes(seed)
        if len(seed) != SEED_LENGTH:
            raise KeyLengthError(
                f"seed length mismatch, expected: {SEED_LENGTH}, got: {len(seed)}"
            )
        public = Ed25519PrivateKey.from_private_bytes(seed).public_key()
        public_raw = public.public_bytes(Encoding.Raw, _raw_public_format())
        return cls.from_bytes(seed + public_raw)

    def sign(self, message: bytes) -> bytes:
        signer = Ed25519PrivateKey.from_private_bytes(self.private_key[:SEED_LENGTH])
        return signer.sign(bytes(message))


def _raw_public_format():
    from cryptography.hazmat.primitives.serialization import PublicFormat

    return PublicFormat.Raw