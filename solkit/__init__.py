"""Ed25519 keys, transaction messages, signed transactions and a JSON-RPC client for Solana."""

__version__ = "0.1.0"