"""Transaction queries: details, signature statuses, history and airdrops."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from solkit.rpc.base import (
    Commitment,
    CommitmentConfig,
    Context,
    JsonModel,
    RpcResponse,
    RpcTransport,
)
from solkit.rpc.tokens import TokenAmount


class TransactionEncoding(str, enum.Enum):
    """Encoding of a returned transaction."""

    JSON = "json"
    JSON_PARSED = "jsonParsed"
    BASE58 = "base58"
    BASE64 = "base64"


@dataclass
class TransactionConfig(JsonModel, omit_empty=True):
    encoding: TransactionEncoding | None = None
    commitment: Commitment | None = None  # "processed" is not supported


@dataclass
class TransactionTokenBalance(JsonModel):
    account_index: int = 0
    mint: str = ""
    owner: str = field(default="", metadata={"omitempty": True})
    ui_token_amount: TokenAmount = field(default_factory=TokenAmount)


@dataclass
class RpcInstruction(JsonModel):
    """A compiled instruction as a node reports it."""

    program_id_index: int = 0
    accounts: list[int] = field(default_factory=list)
    data: str = ""


@dataclass
class InnerInstruction(JsonModel):
    index: int = 0
    instructions: list[RpcInstruction] = field(default_factory=list)


class RewardType(str, enum.Enum):
    """Kind of a reward; only rent exists so far."""

    RENT = "rent"


@dataclass
class TransactionReward(JsonModel):
    pubkey: str = ""
    lamports: int = 0
    post_balance: int = 0
    reward_type: RewardType | None = None
    commission: int | None = None


@dataclass
class TransactionMeta(JsonModel):
    err: Any = None
    fee: int = 0
    pre_balances: list[int] = field(default_factory=list)
    post_balances: list[int] = field(default_factory=list)
    pre_token_balances: list[TransactionTokenBalance] = field(default_factory=list)
    post_token_balances: list[TransactionTokenBalance] = field(default_factory=list)
    log_messages: list[str] = field(default_factory=list)
    inner_instructions: list[InnerInstruction] = field(default_factory=list)


@dataclass
class TransactionResult(JsonModel):
    slot: int = 0
    meta: TransactionMeta | None = None
    transaction: Any = None
    block_time: int | None = None


@dataclass
class SignatureStatus(JsonModel):
    slot: int = 0
    confirmations: int | None = None
    confirmation_status: Commitment | None = None
    err: Any = None


@dataclass
class SignatureStatusesConfig(JsonModel, omit_empty=True):
    search_transaction_history: bool = False


@dataclass
class SignatureStatusesResult(JsonModel):
    """Statuses in request order; None where a signature is unknown."""

    context: Context = field(default_factory=Context)
    value: list[SignatureStatus | None] = field(default_factory=list)


@dataclass
class SignaturesForAddressConfig(JsonModel, omit_empty=True):
    limit: int = 0  # between 1 and 1000; the node defaults to 1000
    before: str = ""
    until: str = ""
    commitment: Commitment | None = None  # "processed" is not supported


@dataclass
class SignatureInfo(JsonModel):
    signature: str = ""
    slot: int = 0
    block_time: int | None = None
    err: Any = None
    memo: str | None = None


class TransactionMethods(RpcTransport):
    """RPC methods that look up transactions and request airdrops."""

    def get_transaction(
        self, signature: str, config: TransactionConfig | None = None
    ) -> RpcResponse:
        """Return the details of a confirmed transaction, or None if unknown."""
        params = [signature] if config is None else [signature, config]
        return self._request("getTransaction", TransactionResult | None, *params)

    def get_signature_statuses(
        self, signatures: list[str], config: SignatureStatusesConfig | None = None
    ) -> RpcResponse:
        """Return the status of each signature."""
        params = [signatures] if config is None else [signatures, config]
        return self._request("getSignatureStatuses", SignatureStatusesResult, *params)

    def get_signatures_for_address(
        self, address: str, config: SignaturesForAddressConfig | None = None
    ) -> RpcResponse:
        """Return confirmed signatures involving address, newest first."""
        params = [address] if config is None else [address, config]
        return self._request("getSignaturesForAddress", list[SignatureInfo], *params)

    def request_airdrop(
        self, address: str, lamports: int, config: CommitmentConfig | None = None
    ) -> RpcResponse:
        """Request an airdrop of lamports to address; the result is its signature."""
        params = [address, lamports] if config is None else [address, lamports, config]
        return self._request("requestAirdrop", str, *params)