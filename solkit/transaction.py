"""Signed transactions and their wire format."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.account import SIGNATURE_LENGTH, Account
from solkit.message import Message, MessageDecodeError, encode_length, read_uvarint


class TransactionError(ValueError):
    """Raised when a transaction cannot be built, packed or parsed."""


class SignerMismatchError(TransactionError):
    """A signature or signer does not belong to any required signer slot."""


def _empty_signatures(message: Message) -> list[bytes]:
    return [bytes(SIGNATURE_LENGTH) for _ in range(message.header.num_required_signatures)]


@dataclass
class Transaction:
    signatures: list[bytes] = field(default_factory=list)
    message: Message | None = None

    @classmethod
    def unsigned(cls, message: Message) -> Transaction:
        """Create a transaction with zeroed signature slots."""
        return cls(_empty_signatures(message), message)

    @classmethod
    def signed(cls, message: Message, signers: list[Account]) -> Transaction:
        """Create a transaction and sign it with each signer in its slot."""
        signatures = _empty_signatures(message)
        slots = {
            key: index
            for index, key in enumerate(message.accounts[: message.header.num_required_signatures])
        }
        data = message.serialize()
        for signer in signers:
            try:
                index = slots[signer.public_key]
            except KeyError:
                raise SignerMismatchError(
                    f"add not necessary signatures, {signer.public_key} is not a signer"
                ) from None
            signatures[index] = signer.sign(data)
        return cls(signatures, message)

    def add_signature(self, signature: bytes) -> None:
        """Place a signature in the slot of the signer that made it."""
        data = self.message.serialize()
        required = self.message.accounts[: self.message.header.num_required_signatures]
        for index, key in enumerate(required):
            if key.verify(data, signature):
                self.signatures[index] = bytes(signature)
                return
        raise SignerMismatchError("add not necessary signatures, no match signer")

    def serialize(self) -> bytes:
        count = len(self.signatures)
        if count == 0 or count != self.message.header.num_required_signatures:
            raise TransactionError("Signature verification failed")
        return (
            encode_length(count)
            + b"".join(bytes(signature) for signature in self.signatures)
            + self.message.serialize()
        )

    @classmethod
    def deserialize(cls, data: bytes) -> Transaction:
        data = bytes(data)
        try:
            count, offset = read_uvarint(data)
        except MessageDecodeError as exc:
            raise TransactionError(f"parse signature count error: {exc}") from exc
        if count < 1:
            raise TransactionError("signature count must be greater than or equal to 1")
        end = offset + count * SIGNATURE_LENGTH
        if len(data) < end:
            raise TransactionError("parse signature error")
        signatures = [
            data[start : start + SIGNATURE_LENGTH]
            for start in range(offset, end, SIGNATURE_LENGTH)
        ]
        try:
            message = Message.deserialize(data[end:])
        except MessageDecodeError as exc:
            raise TransactionError(f"failed to parse message, err: {exc}") from exc
        if message.header.num_required_signatures != count:
            raise TransactionError("numRequireSignatures is not equal to signatureCount")
        return cls(signatures, message)