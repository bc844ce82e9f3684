"""Pure-Python AES, ChaCha20 and ChaCha8 cipher primitives."""

__version__ = "0.1.0"
__all__ = ["aes_constants", "aes_round", "aes", "chacha", "chacha8"]