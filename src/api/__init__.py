"""HTTP surface: JSON-RPC endpoint and REST facade."""
