"""Cluster queries: slots, transaction count, version and inflation."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.rpc.base import (
    Commitment,
    CommitmentConfig,
    JsonModel,
    RpcResponse,
    RpcTransport,
)


@dataclass
class VersionInfo(JsonModel):
    """Versions of the software running on the node."""

    solana_core: str = field(default="", metadata={"json": "solana-core"})
    feature_set: int | None = field(default=None, metadata={"json": "feature-set"})


@dataclass
class InflationRate(JsonModel):
    """Inflation values for the current epoch."""

    epoch: int = 0
    foundation: float = 0.0
    total: float = 0.0
    validator: float = 0.0


@dataclass
class InflationRewardConfig(JsonModel, omit_empty=True):
    commitment: Commitment | None = None
    epoch: int = 0


@dataclass
class InflationReward(JsonModel):
    epoch: int = 0
    effective_slot: int = 0
    amount: int = 0
    post_balance: int = 0
    commission: int | None = None


class ClusterMethods(RpcTransport):
    """RPC methods that describe the state of the cluster."""

    def get_slot(self, config: CommitmentConfig | None = None) -> RpcResponse:
        """Return the slot the node has reached."""
        params = [] if config is None else [config]
        return self._request("getSlot", int, *params)

    def minimum_ledger_slot(self) -> RpcResponse:
        """Return the lowest slot the node still has in its ledger."""
        return self._request("minimumLedgerSlot", int)

    def get_transaction_count(self, config: CommitmentConfig | None = None) -> RpcResponse:
        """Return the current transaction count from the ledger."""
        params = [] if config is None else [config]
        return self._request("getTransactionCount", int, *params)

    def get_version(self) -> RpcResponse:
        """Return the versions running on the node."""
        return self._request("getVersion", VersionInfo)

    def get_inflation_rate(self) -> RpcResponse:
        """Return the inflation values for the current epoch."""
        return self._request("getInflationRate", InflationRate)

    def get_inflation_reward(
        self, addresses: list[str], config: InflationRewardConfig | None = None
    ) -> RpcResponse:
        """Return the inflation reward of each address; None where there is none."""
        params = [addresses] if config is None else [addresses, config]
        return self._request("getInflationReward", list[InflationReward | None], *params)