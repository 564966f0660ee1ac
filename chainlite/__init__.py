"""A small teaching blockchain with Merkle trees, integrity checks and an interactive console."""

__version__ = "0.1.0"