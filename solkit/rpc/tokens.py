"""Token queries: balances, supply and accounts by owner."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.rpc.accounts import DataSlice, ProgramAccount
from solkit.rpc.base import (
    AccountEncoding,
    Commitment,
    CommitmentConfig,
    Context,
    JsonModel,
    RpcResponse,
    RpcTransport,
)


@dataclass
class TokenAmount(JsonModel):
    amount: str = ""
    decimals: int = 0
    ui_amount_string: str = ""


@dataclass
class TokenAmountResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: TokenAmount = field(default_factory=TokenAmount)


@dataclass
class TokenAccountsFilter(JsonModel, omit_empty=True):
    """Select token accounts by either mint or program id."""

    mint: str = ""
    program_id: str = ""


@dataclass
class TokenAccountsByOwnerConfig(JsonModel, omit_empty=True):
    commitment: Commitment | None = None
    encoding: AccountEncoding | None = None
    data_slice: DataSlice | None = None


@dataclass
class TokenAccountsResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: list[ProgramAccount] = field(default_factory=list)


class TokenMethods(RpcTransport):
    """RPC methods that read token state."""

    def get_token_account_balance(
        self, address: str, config: CommitmentConfig | None = None
    ) -> RpcResponse:
        """Return the token balance of a token account."""
        params = [address] if config is None else [address, config]
        return self._request("getTokenAccountBalance", TokenAmountResult, *params)

    def get_token_supply(self, mint: str, config: CommitmentConfig | None = None) -> RpcResponse:
        """Return the total supply of a token mint."""
        params = [mint] if config is None else [mint, config]
        return self._request("getTokenSupply", TokenAmountResult, *params)

    def get_token_accounts_by_owner(
        self,
        owner: str,
        token_filter: TokenAccountsFilter,
        config: TokenAccountsByOwnerConfig | None = None,
    ) -> RpcResponse:
        """Return the token accounts held by owner that match the filter."""
        params = [owner, token_filter] if config is None else [owner, token_filter, config]
        return self._request("getTokenAccountsByOwner", TokenAccountsResult, *params)