# seedyciphers

Small, dependency-free Python implementations of three cipher primitives:

- **AES** (128, 192 and 256-bit keys): single-block encryption and
  decryption, key expansion and the individual round transformations.
- **ChaCha20** with a 96-bit nonce and a 32-bit block counter, one block
  per call.
- **ChaCha8**, the eight-round variant with a 64-bit IV and a 64-bit block
  counter, usable as a keystream generator or an XOR stream cipher.

These are reference implementations, written for clarity and testability
rather than speed or side-channel resistance. Do not use them to protect
real secrets.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `seedyciphers.aes_constants` | `S_BOX`, `INV_S_BOX`, `ROUND_CONSTANTS`, `KeyLength`, `RoundCount`, `round_count` |
| `seedyciphers.aes_round` | the AES round transformations on a 16-byte state |
| `seedyciphers.aes` | `AESContext`, `key_expansion`, `sub_word`, `rot_word`, `increment_counter` |
| `seedyciphers.chacha` | `ChaChaContext`, `build_state`, `rounds`, `double_round`, `quarter_round`, `rotate_left` |
| `seedyciphers.chacha8` | `ChaCha8`, `chacha8_block` |

## AES

```python
from seedyciphers.aes import AESContext
from seedyciphers.aes_constants import KeyLength

key = bytes(range(16))
ctx = AESContext(key, KeyLength.AES_128)

ciphertext = ctx.encrypt_block(bytes.fromhex("00112233445566778899aabbccddeeff"))
assert ciphertext.hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"
assert ctx.decrypt_block(ciphertext).hex() == "00112233445566778899aabbccddeeff"
assert ctx.block_length() == 16
```

If the key length is left out, it is taken from the key itself (16, 24 or
32 bytes). `round_count` raises `ValueError` for any other length.
`encrypt_block` and `decrypt_block` take exactly one 16-byte block; an empty
input returns `b""`, and any other length raises `ValueError`.

The round functions in `seedyciphers.aes_round` can be used on their own:
`sub_bytes`, `shift_rows`, `mix_columns`, `add_round_key`, their inverses,
`shift_row`, the combined `aes_round` and `aes_inv_round`, and `gf_multiply`
for multiplication in GF(2^8). Each takes a 16-byte column-major state and
returns a new `bytes` object.

`key_expansion(key, key_words, schedule_length)` returns the round-key
schedule as a tuple of 32-bit words, each holding four schedule bytes in
little-endian order. `increment_counter` returns a counter block with its
first eight bytes incremented as a little-endian integer, wrapping at 2**64.

## ChaCha20

```python
from seedyciphers.chacha import ChaChaContext

key = bytes(range(32))
nonce = bytes.fromhex("000000000000004a00000000")

ciphertext = ChaChaContext(key, nonce, 1).encrypt_block(
    b"Ladies and Gentlemen of the class of '99: If I could offer you o"
)
plaintext = ChaChaContext(key, nonce, 1).decrypt_block(ciphertext)
```

Encryption and decryption keep separate block counters, both starting from
the counter given to the constructor. Each call to `encrypt_block` or
`decrypt_block` uses the keystream block for its current counter and then
advances that counter by two. Input longer than one 64-byte block is cut to
its first 16 bytes. `next_block(counter)` returns the raw 64 keystream bytes
for any block number.

## ChaCha8

```python
from seedyciphers.chacha8 import ChaCha8

key = bytes(32)
iv = bytes(8)
cipher = ChaCha8(key, iv)
stream = cipher.keystream(64)

cipher.set_iv(iv)
ciphertext = cipher.encrypt(b"hello")
cipher.set_iv(iv)
assert cipher.decrypt(ciphertext) == b"hello"
```

Keys may be 16 or 32 bytes. Every call consumes whole 64-byte keystream
blocks, so a call for a partial block discards the rest of that block.
Calling `set_iv` resets the block counter to zero, so the same key and IV
reproduce the same keystream. `chacha8_block` turns a sixteen-word state
into 64 keystream bytes.

## What this package does not do

- There is no command-line tool; the package is a library only.
- AES works on single blocks. There are no modes of operation (CBC, CTR,
  GCM and so on) and no padding; `increment_counter` is only the building
  block for a counter mode.
- `ChaChaContext` handles at most one block per call and offers no
  authentication; neither ChaCha variant provides a MAC.
- No random number generation or key management is included.