"""Synchronous JSON-RPC client, request configs and response models for a Solana node."""