"""AES block cipher: key schedule, block encryption and block decryption."""

from __future__ import annotations

from seedyciphers.aes_constants import (
    BLOCK_BYTES,
    BLOCK_WORDS,
    ROUND_CONSTANTS,
    S_BOX,
    WORD_BYTES,
    KeyLength,
    RoundCount,
    round_count,
)
from seedyciphers.aes_round import (
    add_round_key,
    aes_inv_round,
    aes_round,
    inv_shift_rows,
    inv_sub_bytes,
    shift_rows,
    sub_bytes,
)

__all__ = [
    "AESContext",
    "key_expansion",
    "sub_word",
    "rot_word",
    "increment_counter",
]

_WORD_MASK = 0xFFFFFFFF
_COUNTER_BYTES = 8


def _word_bytes(word: int) -> bytes:
    return word.to_bytes(WORD_BYTES, "little")


def _check_word(word: int) -> None:
    if not 0 <= word <= _WORD_MASK:
        raise ValueError(f"word must fit in 32 bits, got {word!r}")


def sub_word(word: int) -> int:
    """Substitute each byte of a 32-bit word through the AES S-box.

    Words hold their bytes in little-endian order, so the least significant
    byte is the first byte of the word.
    """
    _check_word(word)
    return int.from_bytes(_word_bytes(word).translate(S_BOX), "little")


def rot_word(word: int) -> int:
    """Cyclically shift the bytes of a word by one position towards the first byte."""
    _check_word(word)
    raw = _word_bytes(word)
    return int.from_bytes(raw[1:] + raw[:1], "little")


def key_expansion(key: bytes, key_words: KeyLength | int, schedule_length: int) -> tuple[int, ...]:
    """Expand ``key`` into ``schedule_length`` 32-bit round-key words.

    Each word holds four key-schedule bytes in little-endian order.
    """
    words = KeyLength(key_words)
    raw = bytes(key)
    if len(raw) != words * WORD_BYTES:
        raise ValueError(f"key must be {words * WORD_BYTES} bytes, got {len(raw)}")
    if schedule_length < words:
        raise ValueError(
            f"schedule length {schedule_length} is shorter than the key ({int(words)} words)"
        )
    schedule = [
        int.from_bytes(raw[start:start + WORD_BYTES], "little")
        for start in range(0, len(raw), WORD_BYTES)
    ]
    for index in range(words, schedule_length):
        temp = schedule[index - 1]
        if index % words == 0:
            temp = sub_word(rot_word(temp)) ^ ROUND_CONSTANTS[index // words]
        elif words > KeyLength.AES_192 and index % words == KeyLength.AES_128:
            temp = sub_word(temp)
        schedule.append(temp ^ schedule[index - words])
    return tuple(schedule)


def increment_counter(counter: bytes) -> bytes:
    """Return ``counter`` with its first eight bytes incremented as a little-endian integer.

    The increment wraps at 2**64; any bytes after the first eight are kept as they are.
    """
    raw = bytes(counter)
    if len(raw) < _COUNTER_BYTES:
        raise ValueError(f"counter must be at least {_COUNTER_BYTES} bytes, got {len(raw)}")
    value = (int.from_bytes(raw[:_COUNTER_BYTES], "little") + 1) % (1 << (8 * _COUNTER_BYTES))
    return value.to_bytes(_COUNTER_BYTES, "little") + raw[_COUNTER_BYTES:]


class AESContext:
    """An AES key prepared for encrypting and decrypting single blocks."""

    __slots__ = ("key_words", "num_rounds", "block_words", "round_key_length", "schedule", "_round_keys")

    def __init__(self, key: bytes, key_length: KeyLength | int | None = None) -> None:
        if key is None:
            raise TypeError("an AES key is required")
        raw = bytes(key)
        if key_length is None:
            if len(raw) % WORD_BYTES:
                raise ValueError(f"key length {len(raw)} is not a whole number of words")
            key_length = len(raw) // WORD_BYTES
        self.num_rounds: RoundCount = round_count(key_length)
        self.key_words = KeyLength(key_length)
        self.block_words = BLOCK_WORDS
        self.round_key_length = self.block_words * (self.num_rounds + 1)
        self.schedule = key_expansion(raw, self.key_words, self.round_key_length)
        self._round_keys = tuple(
            b"".join(_word_bytes(w) for w in self.schedule[start:start + self.block_words])
            for start in range(0, self.round_key_length, self.block_words)
        )

    def block_length(self) -> int:
        """Return the cipher block size in bytes."""
        return self.block_words * WORD_BYTES

    @staticmethod
    def _check_block(block: bytes) -> bytes:
        raw = bytes(block)
        if raw and len(raw) != BLOCK_BYTES:
            raise ValueError(f"block must be {BLOCK_BYTES} bytes, got {len(raw)}")
        return raw

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block; an empty input gives an empty output."""
        state = self._check_block(block)
        if not state:
            return b""
        keys = self._round_keys
        state = add_round_key(state, keys[0])
        for round_key in keys[1:self.num_rounds]:
            state = aes_round(state, round_key)
        return add_round_key(shift_rows(sub_bytes(state)), keys[self.num_rounds])

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block; an empty input gives an empty output."""
        state = self._check_block(block)
        if not state:
            return b""
        keys = self._round_keys
        state = add_round_key(state, keys[self.num_rounds])
        for round_key in reversed(keys[1:self.num_rounds]):
            state = aes_inv_round(state, round_key)
        return add_round_key(inv_sub_bytes(inv_shift_rows(state)), keys[0])