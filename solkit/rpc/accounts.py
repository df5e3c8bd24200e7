"""Account queries: multiple accounts, program accounts and rent exemption."""

from __future__ import annotations

from dataclasses import dataclass, field

from solkit.rpc.base import (
    AccountEncoding,
    AccountInfo,
    Commitment,
    CommitmentConfig,
    Context,
    JsonModel,
    RpcResponse,
    RpcTransport,
)


@dataclass
class MultipleAccountsDataSlice(JsonModel, omit_empty=True):
    offset: int = 0
    length: int = 0


@dataclass
class MultipleAccountsConfig(JsonModel, omit_empty=True):
    commitment: Commitment | None = None
    encoding: AccountEncoding | None = None
    data_slice: MultipleAccountsDataSlice | None = None


@dataclass
class MultipleAccountsResult(JsonModel):
    """Accounts in request order; None where an account does not exist."""

    context: Context = field(default_factory=Context)
    value: list[AccountInfo | None] = field(default_factory=list)


@dataclass
class DataSlice(JsonModel):
    offset: int = 0
    length: int = 0


@dataclass
class MemCmpFilter(JsonModel):
    offset: int = 0
    bytes: str = ""


@dataclass
class ProgramAccountsFilter(JsonModel, omit_empty=True):
    """Set either memcmp or data_size; use two filters to apply both."""

    memcmp: MemCmpFilter | None = None
    data_size: int = 0


@dataclass
class ProgramAccountsConfig(JsonModel, omit_empty=True):
    encoding: AccountEncoding | None = None
    commitment: Commitment | None = None
    data_slice: DataSlice | None = None
    filters: list[ProgramAccountsFilter] = field(default_factory=list)


@dataclass
class ProgramAccount(JsonModel):
    pubkey: str = ""
    account: AccountInfo = field(default_factory=AccountInfo)


@dataclass
class ProgramAccountsWithContextResult(JsonModel):
    context: Context = field(default_factory=Context)
    value: list[ProgramAccount] = field(default_factory=list)


class AccountMethods(RpcTransport):
    """RPC methods that read accounts."""

    def get_multiple_accounts(
        self, addresses: list[str], config: MultipleAccountsConfig | None = None
    ) -> RpcResponse:
        """Return the account information for each base58 address."""
        params = [addresses] if config is None else [addresses, config]
        return self._request("getMultipleAccounts", MultipleAccountsResult, *params)

    def get_program_accounts(
        self, program_id: str, config: ProgramAccountsConfig | None = None
    ) -> RpcResponse:
        """Return all accounts owned by a program."""
        params = [program_id] if config is None else [program_id, config]
        return self._request("getProgramAccounts", list[ProgramAccount], *params)

    def get_program_accounts_with_context(
        self, program_id: str, config: ProgramAccountsConfig | None = None
    ) -> RpcResponse:
        """Return all accounts owned by a program, with the slot context."""
        options = (config or ProgramAccountsConfig()).to_json()
        options["withContext"] = True
        return self._request(
            "getProgramAccounts", ProgramAccountsWithContextResult, program_id, options
        )

    def get_minimum_balance_for_rent_exemption(
        self, data_len: int, config: CommitmentConfig | None = None
    ) -> RpcResponse:
        """Return the minimum balance that makes an account of data_len bytes rent exempt."""
        params = [data_len] if config is None else [data_len, config]
        return self._request("getMinimumBalanceForRentExemption", int, *params)