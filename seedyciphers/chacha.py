"""ChaCha20 stream cipher working one 64-byte block at a time.

The state is sixteen 32-bit words: four constant words, eight key words, one
block-counter word and three nonce words. Bytes are packed into words in
little-endian order.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

__all__ = [
    "CHACHA_CONSTANT",
    "BLOCK_WORDS",
    "KEY_BYTES",
    "NONCE_BYTES",
    "DOUBLE_ROUNDS",
    "ChaChaContext",
    "build_state",
    "rounds",
    "double_round",
    "quarter_round",
    "rotate_left",
]

CHACHA_CONSTANT = b"expand 32-byte k"
"""The sixteen constant bytes that open every ChaCha state."""

BLOCK_WORDS = 16
"""Number of 32-bit words in a ChaCha block."""

KEY_BYTES = 32
"""Size of a ChaCha key in bytes."""

NONCE_BYTES = 12
"""Size of a ChaCha nonce in bytes."""

DOUBLE_ROUNDS = 10
"""Number of double rounds (odd plus even) performed by ChaCha20."""

_WORD_MASK = 0xFFFFFFFF
_WORD_BITS = 32
_BLOCK_FORMAT = f"<{BLOCK_WORDS}I"

_COLUMN_QUARTERS = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
_DIAGONAL_QUARTERS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def _check_counter(counter: int) -> int:
    if not 0 <= counter <= _WORD_MASK:
        raise ValueError(f"counter must fit in 32 bits, got {counter!r}")
    return counter


def _check_bytes(data: bytes, size: int, what: str) -> bytes:
    if data is None:
        raise TypeError(f"a ChaCha {what} is required")
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(raw)}")
    return raw


def rotate_left(word: int, shift: int) -> int:
    """Rotate a 32-bit word left by ``shift`` bits."""
    if not 0 <= word <= _WORD_MASK:
        raise ValueError(f"word must fit in 32 bits, got {word!r}")
    if not 0 <= shift < _WORD_BITS:
        raise ValueError(f"shift must be in range 0..{_WORD_BITS - 1}, got {shift!r}")
    return ((word << shift) | (word >> (_WORD_BITS - shift))) & _WORD_MASK


def quarter_round(state: Sequence[int], a: int, b: int, c: int, d: int) -> list[int]:
    """Apply the quarter round to the words at indices ``a``, ``b``, ``c`` and ``d``.

    Returns a new list; the other words are copied unchanged.
    """
    words = list(state)
    if len(words) != BLOCK_WORDS:
        raise ValueError(f"state must hold {BLOCK_WORDS} words, got {len(words)}")
    wa, wb, wc, wd = words[a], words[b], words[c], words[d]

    wa = (wa + wb) & _WORD_MASK
    wd = rotate_left(wd ^ wa, 16)
    wc = (wc + wd) & _WORD_MASK
    wb = rotate_left(wb ^ wc, 12)
    wa = (wa + wb) & _WORD_MASK
    wd = rotate_left(wd ^ wa, 8)
    wc = (wc + wd) & _WORD_MASK
    wb = rotate_left(wb ^ wc, 7)

    words[a], words[b], words[c], words[d] = wa, wb, wc, wd
    return words


def double_round(state: Sequence[int]) -> list[int]:
    """Apply one column round followed by one diagonal round."""
    words = list(state)
    for indices in _COLUMN_QUARTERS + _DIAGONAL_QUARTERS:
        words = quarter_round(words, *indices)
    return words


def rounds(state: Sequence[int], num_rounds: int) -> list[int]:
    """Apply ``num_rounds`` double rounds to the state and return the result."""
    if num_rounds < 0:
        raise ValueError(f"round count must not be negative, got {num_rounds!r}")
    words = list(state)
    for _ in range(num_rounds):
        words = double_round(words)
    return words


def build_state(key: bytes, nonce: bytes, counter: int) -> list[int]:
    """Assemble the sixteen-word input state from key, nonce and block counter."""
    raw_key = _check_bytes(key, KEY_BYTES, "key")
    raw_nonce = _check_bytes(nonce, NONCE_BYTES, "nonce")
    return [
        *struct.unpack("<4I", CHACHA_CONSTANT),
        *struct.unpack("<8I", raw_key),
        _check_counter(counter),
        *struct.unpack("<3I", raw_nonce),
    ]


class ChaChaContext:
    """A ChaCha20 key and nonce with separate encryption and decryption counters.

    Each call to :meth:`encrypt_block` or :meth:`decrypt_block` handles at most
    one block and then advances its own counter by two.
    """

    __slots__ = ("key", "nonce", "encrypt_counter", "decrypt_counter", "num_rounds", "block_words")

    def __init__(self, key: bytes, nonce: bytes, counter: int) -> None:
        self.key = _check_bytes(key, KEY_BYTES, "key")
        self.nonce = _check_bytes(nonce, NONCE_BYTES, "nonce")
        start = _check_counter(counter)
        self.encrypt_counter = start
        self.decrypt_counter = start
        self.num_rounds = DOUBLE_ROUNDS
        self.block_words = BLOCK_WORDS

    def block_length(self) -> int:
        """Return the keystream block size in bytes."""
        return self.block_words * 4

    def next_block(self, counter: int) -> bytes:
        """Return the 64 keystream bytes for block number ``counter``."""
        state = build_state(self.key, self.nonce, counter)
        mixed = rounds(state, self.num_rounds)
        return struct.pack(
            _BLOCK_FORMAT, *((m + s) & _WORD_MASK for m, s in zip(mixed, state))
        )

    def _limit(self, data: bytes) -> bytes:
        raw = bytes(data)
        # Over-long input is cut to block_words bytes, not to a full block.
        if len(raw) > self.block_length():
            raw = raw[:self.block_words]
        return raw

    def encrypt_block(self, data: bytes) -> bytes:
        """XOR up to one block of ``data`` with the next encryption keystream block.

        Input longer than a block is cut to its first ``block_words`` bytes.
        """
        raw = self._limit(data)
        keystream = self.next_block(self.encrypt_counter)
        self.encrypt_counter = (self.encrypt_counter + 2) & _WORD_MASK
        return bytes(k ^ d for k, d in zip(keystream, raw))

    def decrypt_block(self, data: bytes) -> bytes:
        """XOR up to one block of ``data`` with the next decryption keystream block.

        Input longer than a block is cut to its first ``block_words`` bytes.
        """
        raw = self._limit(data)
        keystream = self.next_block(self.decrypt_counter)
        self.decrypt_counter = (self.decrypt_counter + 2) & _WORD_MASK
        return bytes(k ^ d for k, d in zip(keystream, raw))