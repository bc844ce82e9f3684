"""AES round transformations on a 16-byte column-major state.

The state is laid out as four 4-byte columns, so byte ``4 * column + row``
holds the element at ``(row, column)``. Every function takes a bytes-like
state and returns a new ``bytes`` object; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable

from seedyciphers.aes_constants import BLOCK_BYTES, BLOCK_WORDS, INV_S_BOX, S_BOX, WORD_BYTES

__all__ = [
    "aes_round",
    "aes_inv_round",
    "add_round_key",
    "sub_bytes",
    "shift_rows",
    "mix_columns",
    "inv_sub_bytes",
    "inv_shift_rows",
    "inv_mix_columns",
    "gf_multiply",
    "shift_row",
]

_MIX = (0x02, 0x03, 0x01, 0x01)
_INV_MIX = (0x0E, 0x0B, 0x0D, 0x09)


def _as_block(data: bytes | bytearray | Iterable[int], what: str) -> bytes:
    block = bytes(data)
    if len(block) != BLOCK_BYTES:
        raise ValueError(f"{what} must be {BLOCK_BYTES} bytes, got {len(block)}")
    return block


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) with the AES reduction polynomial."""
    for value in (a, b):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"GF(2^8) operands must be bytes, got {value!r}")
    product = 0
    while a and b:
        if b & 1:
            product ^= a
        b >>= 1
        a <<= 1
        if a & 0x100:
            a ^= 0x11B
    return product


def add_round_key(state: bytes, round_key: bytes) -> bytes:
    """XOR the state with a 16-byte round key."""
    block = _as_block(state, "state")
    key = _as_block(round_key, "round key")
    return bytes(s ^ k for s, k in zip(block, key))


def _substitute(state: bytes, table: bytes) -> bytes:
    return _as_block(state, "state").translate(table)


def sub_bytes(state: bytes) -> bytes:
    """Apply the forward S-box to every byte of the state."""
    return _substitute(state, S_BOX)


def inv_sub_bytes(state: bytes) -> bytes:
    """Apply the inverse S-box to every byte of the state."""
    return _substitute(state, INV_S_BOX)


def shift_row(state: bytes, row: int, shift: int) -> bytes:
    """Cyclically rotate one row of the state left by ``shift`` columns.

    A negative ``shift`` rotates to the right.
    """
    block = bytearray(_as_block(state, "state"))
    if not 0 <= row < WORD_BYTES:
        raise ValueError(f"row must be in range 0..{WORD_BYTES - 1}, got {row}")
    original = block[row::WORD_BYTES]
    offset = shift % BLOCK_WORDS
    block[row::WORD_BYTES] = original[offset:] + original[:offset]
    return bytes(block)


def shift_rows(state: bytes) -> bytes:
    """Rotate row ``r`` of the state left by ``r`` positions."""
    result = _as_block(state, "state")
    for row in range(1, WORD_BYTES):
        result = shift_row(result, row, row)
    return result


def inv_shift_rows(state: bytes) -> bytes:
    """Rotate row ``r`` of the state right by ``r`` positions."""
    result = _as_block(state, "state")
    for row in range(1, WORD_BYTES):
        result = shift_row(result, row, -row)
    return result


def _mix(state: bytes, coefficients: tuple[int, ...]) -> bytes:
    block = _as_block(state, "state")
    out = bytearray()
    for start in range(0, BLOCK_BYTES, WORD_BYTES):
        column = block[start:start + WORD_BYTES]
        for row in range(WORD_BYTES):
            value = 0
            for offset, coefficient in enumerate(coefficients):
                value ^= gf_multiply(column[(row + offset) % WORD_BYTES], coefficient)
            out.append(value)
    return bytes(out)


def mix_columns(state: bytes) -> bytes:
    """Apply the MixColumns matrix to each column of the state."""
    return _mix(state, _MIX)


def inv_mix_columns(state: bytes) -> bytes:
    """Apply the inverse MixColumns matrix to each column of the state."""
    return _mix(state, _INV_MIX)


def aes_round(state: bytes, round_key: bytes) -> bytes:
    """Perform one full encryption round: SubBytes, ShiftRows, MixColumns, AddRoundKey."""
    return add_round_key(mix_columns(shift_rows(sub_bytes(state))), round_key)


def aes_inv_round(state: bytes, round_key: bytes) -> bytes:
    """Perform one decryption round: InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns."""
    return inv_mix_columns(add_round_key(inv_sub_bytes(inv_shift_rows(state)), round_key))