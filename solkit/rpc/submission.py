"""Sending and simulating transactions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from solkit.rpc.base import (
    AccountEncoding,
    AccountInfo,
    Commitment,
    Context,
    JsonModel,
    RpcResponse,
    RpcTransport,
)


class SendEncoding(str, enum.Enum):
    """Encoding of a transaction handed to the node."""

    BASE58 = "base58"  # slow, deprecated by nodes
    BASE64 = "base64"


@dataclass
class SendTransactionConfig(JsonModel, omit_empty=True):
    skip_preflight: bool = False
    preflight_commitment: Commitment | None = None  # node default: finalized
    encoding: SendEncoding | None = None  # node default: base58
    max_retries: int = 0


@dataclass
class SimulateAccountsConfig(JsonModel):
    """Accounts whose state the simulation should return."""

    encoding: AccountEncoding | None = field(default=None, metadata={"omitempty": True})
    addresses: list[str] = field(default_factory=list)


@dataclass
class SimulateTransactionConfig(JsonModel, omit_empty=True):
    sig_verify: bool = False  # conflicts with replace_recent_blockhash
    commitment: Commitment | None = None
    encoding: SendEncoding | None = None
    replace_recent_blockhash: bool = False  # conflicts with sig_verify
    accounts: SimulateAccountsConfig | None = None


@dataclass
class SimulationValue(JsonModel):
    err: Any = None
    logs: list[str] = field(default_factory=list)
    accounts: list[AccountInfo | None] = field(default_factory=list)


@dataclass
class SimulationResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: SimulationValue = field(default_factory=SimulationValue)


class SubmissionMethods(RpcTransport):
    """RPC methods that submit or simulate signed transactions."""

    def send_transaction(
        self, transaction: str, config: SendTransactionConfig | None = None
    ) -> RpcResponse:
        """Submit an encoded signed transaction; the result is its signature."""
        params = [transaction] if config is None else [transaction, config]
        return self._request("sendTransaction", str, *params)

    def simulate_transaction(
        self, transaction: str, config: SimulateTransactionConfig | None = None
    ) -> RpcResponse:
        """Simulate sending an encoded transaction."""
        params = [transaction] if config is None else [transaction, config]
        return self._request("simulateTransaction", SimulationResult, *params)