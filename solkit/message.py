"""Instructions and transaction messages with their wire format."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.account import PublicKey, b58decode, b58encode

_BLOCKHASH_LENGTH = 32
_KEY_LENGTH = 32


class MessageDecodeError(ValueError):
    """Raised when bytes cannot be parsed as a message."""


def encode_length(value: int) -> bytes:
    """Encode an unsigned integer as a little-endian base-128 varint."""
    if value < 0:
        raise ValueError("length must not be negative")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def read_uvarint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Read a varint at offset; return the value and the offset after it."""
    if offset >= len(data):
        raise MessageDecodeError("data is empty")
    value = 0
    for i, byte in enumerate(data[offset : offset + 10]):
        if i == 9 and byte > 1:
            break
        value |= (byte & 0x7F) << (7 * i)
        if byte < 0x80:
            return value, offset + i + 1
    raise MessageDecodeError("format error")


@dataclass
class AccountMeta:
    pubkey: PublicKey
    is_signer: bool
    is_writable: bool


@dataclass
class Instruction:
    program_id: PublicKey
    accounts: list[AccountMeta] = field(default_factory=list)
    data: bytes = b""


@dataclass
class CompiledInstruction:
    program_id_index: int
    accounts: list[int] = field(default_factory=list)
    data: bytes = b""


@dataclass
class MessageHeader:
    num_required_signatures: int
    num_readonly_signed_accounts: int
    num_readonly_unsigned_accounts: int


@dataclass
class Message:
    header: MessageHeader
    accounts: list[PublicKey]
    recent_blockhash: str
    instructions: list[CompiledInstruction]

    def serialize(self) -> bytes:
        """Pack the message into its wire format."""
        out = bytearray(
            [
                self.header.num_required_signatures & 0xFF,
                self.header.num_readonly_signed_accounts & 0xFF,
                self.header.num_readonly_unsigned_accounts & 0xFF,
            ]
        )
        out += encode_length(len(self.accounts))
        for key in self.accounts:
            out += key.data
        out += b58decode(self.recent_blockhash)
        out += encode_length(len(self.instructions))
        for instruction in self.instructions:
            out.append(instruction.program_id_index & 0xFF)
            out += encode_length(len(instruction.accounts))
            out += bytes(index & 0xFF for index in instruction.accounts)
            out += encode_length(len(instruction.data))
            out += instruction.data
        return bytes(out)

    def decompile_instructions(self) -> list[Instruction]:
        """Expand compiled instructions back into full account metadata."""
        header = self.header
        signed = header.num_required_signatures
        writable_signed = signed - header.num_readonly_signed_accounts
        writable_unsigned_end = len(self.accounts) - header.num_readonly_unsigned_accounts

        def meta(index: int) -> AccountMeta:
            return AccountMeta(
                pubkey=self.accounts[index],
                is_signer=index < signed,
                is_writable=index < writable_signed
                or signed <= index < writable_unsigned_end,
            )

        return [
            Instruction(
                program_id=self.accounts[compiled.program_id_index],
                accounts=[meta(index) for index in compiled.accounts],
                data=compiled.data,
            )
            for compiled in self.instructions
        ]

    @classmethod
    def deserialize(cls, data: bytes) -> Message:
        """Parse a message from its wire format."""
        data = bytes(data)
        offset = 0
        header_values = []
        for number in range(1, 4):
            try:
                value, offset = read_uvarint(data, offset)
            except MessageDecodeError as exc:
                raise MessageDecodeError(f"message header #{number} parse error: {exc}") from exc
            if value > 255:
                raise MessageDecodeError(f"message header #{number} parse error: out of range")
            header_values.append(value)

        try:
            account_count, offset = read_uvarint(data, offset)
        except MessageDecodeError as exc:
            raise MessageDecodeError(f"failed to parse count of account, err: {exc}") from exc
        end = offset + account_count * _KEY_LENGTH
        if len(data) < end:
            raise MessageDecodeError("parse account error")
        accounts = [
            PublicKey(data[start : start + _KEY_LENGTH])
            for start in range(offset, end, _KEY_LENGTH)
        ]
        offset = end

        if len(data) - offset < _BLOCKHASH_LENGTH:
            raise MessageDecodeError("parse blockhash error")
        blockhash = b58encode(data[offset : offset + _BLOCKHASH_LENGTH])
        offset += _BLOCKHASH_LENGTH

        try:
            instruction_count, offset = read_uvarint(data, offset)
        except MessageDecodeError as exc:
            raise MessageDecodeError(f"parse instruction count error: {exc}") from exc

        instructions = []
        for number in range(1, instruction_count + 1):
            instruction, offset = _read_instruction(data, offset, number)
            instructions.append(instruction)

        return cls(
            header=MessageHeader(*header_values),
            accounts=accounts,
            recent_blockhash=blockhash,
            instructions=instructions,
        )

    @classmethod
    def compile(
        cls,
        instructions: list[Instruction],
        recent_blockhash: str,
        fee_payer: PublicKey | None = None,
    ) -> Message:
        """Build a message, ordering accounts by signer and writable flags."""
        flags: dict[PublicKey, tuple[bool, bool]] = {}
        for instruction in instructions:
            flags.setdefault(instruction.program_id, (False, False))
            for meta in instruction.accounts:
                signer, writable = flags.get(meta.pubkey, (False, False))
                flags[meta.pubkey] = (signer or meta.is_signer, writable or meta.is_writable)

        has_payer = fee_payer is not None and not fee_payer.is_zero()
        groups: dict[tuple[bool, bool], list[PublicKey]] = {
            (True, True): [],
            (True, False): [],
            (False, True): [],
            (False, False): [],
        }
        for key, key_flags in flags.items():
            if has_payer and key == fee_payer:
                continue
            groups[key_flags].append(key)
        for keys in groups.values():
            keys.sort(key=lambda k: k.data)
        if has_payer:
            groups[(True, True)].insert(0, fee_payer)

        ordered = [
            *groups[(True, True)],
            *groups[(True, False)],
            *groups[(False, True)],
            *groups[(False, False)],
        ]
        index_of = {key: index for index, key in enumerate(ordered)}

        compiled = [
            CompiledInstruction(
                program_id_index=index_of[instruction.program_id],
                accounts=[index_of[meta.pubkey] for meta in instruction.accounts],
                data=instruction.data,
            )
            for instruction in instructions
        ]
        header = MessageHeader(
            num_required_signatures=len(groups[(True, True)]) + len(groups[(True, False)]),
            num_readonly_signed_accounts=len(groups[(True, False)]),
            num_readonly_unsigned_accounts=len(groups[(False, False)]),
        )
        return cls(header, ordered, recent_blockhash, compiled)


def _read_instruction(data: bytes, offset: int, number: int) -> tuple[CompiledInstruction, int]:
    def read(what: str) -> int:
        nonlocal offset
        try:
            value, offset = read_uvarint(data, offset)
        except MessageDecodeError as exc:
            raise MessageDecodeError(f"parse instruction #{number} {what} error: {exc}") from exc
        return value

    program_id = read("programID")
    account_count = read("account count")
    accounts = [read(f"account #{j} idx") for j in range(1, account_count + 1)]
    data_len = read("data length")
    if len(data) - offset < data_len:
        raise MessageDecodeError(f"parse instruction #{number} data error")
    payload = data[offset : offset + data_len]
    return CompiledInstruction(program_id, accounts, payload), offset + data_len