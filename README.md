# solkit

A small Python library for working with the Solana blockchain:

- **Keys** – ed25519 key pairs (`solkit.account.Account`), public keys
  (`solkit.account.PublicKey`) and base58 helpers (`b58encode`, `b58decode`).
- **Messages** – build a message from instructions, serialize it to the wire
  format, read it back and decompile its instructions (`solkit.message`).
- **Transactions** – sign messages, add signatures later, serialize and
  deserialize signed transactions (`solkit.transaction`).
- **RPC** – a synchronous JSON-RPC client over HTTP
  (`solkit.rpc.client.RpcClient`) covering accounts, tokens, blockhashes,
  cluster information, transaction lookup, airdrops, and sending and
  simulating transactions.

## Installation

```
pip install solkit
```

## Keys

```python
from solkit.account import Account, PublicKey

account = Account.generate()
print(account.public_key.to_base58())

signature = account.sign(b"hello")
assert account.public_key.verify(b"hello", signature)

same_key = PublicKey.from_base58(account.public_key.to_base58())
assert same_key == account.public_key
```

An `Account` holds its `public_key` and its 64-byte `private_key` (the 32-byte
seed followed by the public key). Keys can be loaded with
`Account.from_base58`, `Account.from_hex`, `Account.from_bytes` (64 bytes) or
derived with `Account.from_seed` (32 bytes). Malformed input raises
`Base58DecodeError`, `HexDecodeError` or `KeyLengthError`, all subclasses of
`AccountError` (itself a `ValueError`).

`PublicKey.from_bytes` accepts up to 32 bytes and pads shorter input with
leading zeros; `PublicKey.verify` returns `False` rather than raising for a
bad signature.

## Messages

`Message.compile(instructions, recent_blockhash, fee_payer=None)` collects
every account the instructions touch, merges the signer and writable flags of
accounts that appear more than once, and orders them: the fee payer first,
then writable signers, read-only signers, writable non-signers and read-only
non-signers, each group sorted by key bytes. Program ids are added as
read-only non-signers. The header counts follow from that order.

```python
from solkit.account import Account, PublicKey
from solkit.message import AccountMeta, Instruction, Message

payer = Account.generate()
receiver = Account.generate().public_key
program = PublicKey.from_base58("11111111111111111111111111111111")

instruction = Instruction(
    program_id=program,
    accounts=[
        AccountMeta(payer.public_key, is_signer=True, is_writable=True),
        AccountMeta(receiver, is_signer=False, is_writable=True),
    ],
    data=bytes([2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0]),
)

message = Message.compile(
    [instruction], "FwRYtTPRk5N4wUeP87rTw9kQVSwigB6kbikGzzeCMrW5", payer.public_key
)
wire = message.serialize()
assert Message.deserialize(wire) == message
print(message.decompile_instructions())
```

`Message.deserialize` raises `MessageDecodeError` on truncated or malformed
input. The length prefixes of the wire format are little-endian base-128
varints; `encode_length` and `read_uvarint` read and write them.

## Transactions

```python
from solkit.transaction import Transaction

tx = Transaction.signed(message, [payer])
wire = tx.serialize()

decoded = Transaction.deserialize(wire)
assert decoded == tx
```

- `Transaction.unsigned(message)` reserves a zeroed 64-byte slot for every
  required signature.
- `Transaction.signed(message, signers)` fills the slot of each signer; a
  signer that is not among the message's required signers raises
  `SignerMismatchError`.
- `add_signature(signature)` puts a signature into the slot of the required
  signer it verifies against, or raises `SignerMismatchError`.
- `serialize()` raises `TransactionError` when there are no signatures or
  their count differs from the header; `deserialize()` raises
  `TransactionError` on malformed input.

## RPC client

```python
from solkit.rpc.base import Commitment, CommitmentConfig
from solkit.rpc.client import RpcClient

with RpcClient("http://localhost:8899") as client:
    response = client.get_latest_blockhash(CommitmentConfig(Commitment.FINALIZED))
    if response.error is not None:
        print(response.error.code, response.error.message)
    else:
        print(response.result.value.blockhash)
```

`RpcClient(endpoint="http://localhost:8899", http_client=None)` posts
JSON-RPC 2.0 requests with `httpx`. Pass your own `httpx.Client` to control
timeouts or proxies; a client you pass in is not closed by `close()`.

Every method returns an `RpcResponse` with `jsonrpc`, `id`, `result` and
`error`. An error sent back by the node is not raised: it is found in
`response.error` (an `ErrorResponse` with `code`, `message` and `data`), and
`result` is then `None`. Failures to reach the node or to read its reply
raise `RpcRequestError`.

Methods and their optional config objects:

| Method | Config | Result |
| --- | --- | --- |
| `get_multiple_accounts(addresses, config)` | `MultipleAccountsConfig` | `MultipleAccountsResult` |
| `get_program_accounts(program_id, config)` | `ProgramAccountsConfig` | `list[ProgramAccount]` |
| `get_program_accounts_with_context(program_id, config)` | `ProgramAccountsConfig` | `ProgramAccountsWithContextResult` |
| `get_minimum_balance_for_rent_exemption(data_len, config)` | `CommitmentConfig` | `int` |
| `get_token_account_balance(address, config)` | `CommitmentConfig` | `TokenAmountResult` |
| `get_token_supply(mint, config)` | `CommitmentConfig` | `TokenAmountResult` |
| `get_token_accounts_by_owner(owner, token_filter, config)` | `TokenAccountsByOwnerConfig` | `TokenAccountsResult` |
| `get_slot(config)` | `CommitmentConfig` | `int` |
| `minimum_ledger_slot()` | – | `int` |
| `get_transaction_count(config)` | `CommitmentConfig` | `int` |
| `get_version()` | – | `VersionInfo` |
| `get_inflation_rate()` | – | `InflationRate` |
| `get_inflation_reward(addresses, config)` | `InflationRewardConfig` | `list[InflationReward \| None]` |
| `get_latest_blockhash(config)` | `CommitmentConfig` | `LatestBlockhashResult` |
| `get_recent_blockhash(config)` | `CommitmentConfig` | `RecentBlockhashResult` |
| `is_blockhash_valid(blockhash, config)` | `CommitmentConfig` | `BlockhashValidResult` |
| `get_transaction(signature, config)` | `TransactionConfig` | `TransactionResult \| None` |
| `get_signature_statuses(signatures, config)` | `SignatureStatusesConfig` | `SignatureStatusesResult` |
| `get_signatures_for_address(address, config)` | `SignaturesForAddressConfig` | `list[SignatureInfo]` |
| `request_airdrop(address, lamports, config)` | `CommitmentConfig` | `str` (signature) |
| `send_transaction(transaction, config)` | `SendTransactionConfig` | `str` (signature) |
| `simulate_transaction(transaction, config)` | `SimulateTransactionConfig` | `SimulationResult` |

`get_token_accounts_by_owner` takes a `TokenAccountsFilter` with either a
`mint` or a `program_id`. Config fields left at their defaults are not sent.
`send_transaction` and `simulate_transaction` take the already encoded
transaction string; set `encoding=SendEncoding.BASE64` when it is base64.

Result models are dataclasses built on `solkit.rpc.base.JsonModel`, which
maps snake_case fields to the camelCase JSON keys (`from_json`, `to_json`).

## What this package does not do

- It has no ready-made instruction builders for the system, token or other
  on-chain programs; build `Instruction` objects yourself.
- The RPC client is synchronous and HTTP only: there is no async client and
  no websocket subscriptions.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```