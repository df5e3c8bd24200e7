"""The RPC client that offers every supported method."""

from __future__ import annotations

import httpx

from solkit.rpc.accounts import AccountMethods
from solkit.rpc.blockhash import BlockhashMethods
from solkit.rpc.cluster import ClusterMethods
from solkit.rpc.submission import SubmissionMethods
from solkit.rpc.tokens import TokenMethods
from solkit.rpc.transactions import TransactionMethods

DEFAULT_ENDPOINT = "http://localhost:8899"


class RpcClient(
    AccountMethods,
    TokenMethods,
    ClusterMethods,
    BlockhashMethods,
    TransactionMethods,
    SubmissionMethods,
):
    """A JSON-RPC client for a node.

    The endpoint defaults to a local node; pass an httpx.Client to control
    timeouts, proxies and the like. A client supplied by the caller is not
    closed by close().
    """

    def __init__(
        self, endpoint: str = DEFAULT_ENDPOINT, http_client: httpx.Client | None = None
    ) -> None:
        super().__init__(endpoint, http_client)