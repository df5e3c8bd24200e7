"""Blockhash queries: latest, recent and validity checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.rpc.base import (
    CommitmentConfig,
    Context,
    JsonModel,
    RpcResponse,
    RpcTransport,
)


@dataclass
class LatestBlockhash(JsonModel):
    blockhash: str = ""
    last_valid_block_height: int = 0


@dataclass
class LatestBlockhashResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: LatestBlockhash = field(default_factory=LatestBlockhash)


@dataclass
class FeeCalculator(JsonModel):
    lamports_per_signature: int = 0


@dataclass
class RecentBlockhash(JsonModel):
    blockhash: str = ""
    fee_calculator: FeeCalculator = field(default_factory=FeeCalculator)


@dataclass
class RecentBlockhashResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: RecentBlockhash = field(default_factory=RecentBlockhash)


@dataclass
class BlockhashValidResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: bool = False


class BlockhashMethods(RpcTransport):
    """RPC methods that deal with blockhashes."""

    def get_latest_blockhash(self, config: CommitmentConfig | None = None) -> RpcResponse:
        """Return the latest blockhash and the last block height it is valid for."""
        params = [] if config is None else [config]
        return self._request("getLatestBlockhash", LatestBlockhashResult, *params)

    def get_recent_blockhash(self, config: CommitmentConfig | None = None) -> RpcResponse:
        """Return a recent blockhash and its fee schedule (deprecated by nodes)."""
        params = [] if config is None else [config]
        return self._request("getRecentBlockhash", RecentBlockhashResult, *params)

    def is_blockhash_valid(
        self, blockhash: str, config: CommitmentConfig | None = None
    ) -> RpcResponse:
        """Return whether the blockhash is still valid."""
        params = [blockhash] if config is None else [blockhash, config]
        return self._request("isBlockhashValid", BlockhashValidResult, *params)