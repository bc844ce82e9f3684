import pytest

from seedyciphers.aes_round import (
    add_round_key,
    aes_inv_round,
    aes_round,
    gf_multiply,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_row,
    shift_rows,
    sub_bytes,
)

SUB_IN = bytes.fromhex("00102030405060708090a0b0c0d0e0f0")
SUB_OUT = bytes.fromhex("63cab7040953d051cd60e0e7ba70e18c")

SHIFT_IN = bytes.fromhex("d42711aee0bf98f1b8b45de51e415230")
SHIFT_OUT = bytes.fromhex("d4bf5d30e0b452aeb84111f11e2798e5")

MIX_IN = SHIFT_OUT
MIX_OUT = bytes.fromhex("046681e5e0cb199a48f8d37a2806264c")

ARK_KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
ARK_IN = bytes.fromhex("00112233445566778899aabbccddeeff")
ARK_OUT = bytes.fromhex("00102030405060708090a0b0c0d0e0f0")


def test_sub_bytes_vector():
    assert sub_bytes(SUB_IN) == SUB_OUT


def test_inv_sub_bytes_vector():
    assert inv_sub_bytes(SUB_OUT) == SUB_IN


def test_shift_rows_vector():
    assert shift_rows(SHIFT_IN) == SHIFT_OUT


def test_inv_shift_rows_vector():
    assert inv_shift_rows(SHIFT_OUT) == SHIFT_IN


def test_mix_columns_vector():
    assert mix_columns(MIX_IN) == MIX_OUT


def test_inv_mix_columns_vector():
    assert inv_mix_columns(MIX_OUT) == MIX_IN


def test_add_round_key_vector():
    assert add_round_key(ARK_IN, ARK_KEY) == ARK_OUT


def test_input_not_modified():
    state = bytearray(SHIFT_IN)
    shift_rows(state)
    assert bytes(state) == SHIFT_IN


@pytest.mark.parametrize(
    "a, b, expected",
    [(0x57, 0x83, 0xC1), (0x57, 0x13, 0xFE), (0x57, 0x02, 0xAE), (0x00, 0x53, 0x00), (0x01, 0xAB, 0xAB)],
)
def test_gf_multiply_values(a, b, expected):
    assert gf_multiply(a, b) == expected


def test_gf_multiply_is_commutative():
    for a in range(0, 256, 7):
        for b in range(0, 256, 11):
            assert gf_multiply(a, b) == gf_multiply(b, a)


def test_gf_multiply_rejects_out_of_range():
    with pytest.raises(ValueError):
        gf_multiply(256, 2)


def test_shift_row_left_and_right():
    state = bytes(range(16))
    left = shift_row(state, 1, 1)
    assert left[1::4] == bytes([5, 9, 13, 1])
    assert shift_row(left, 1, -1) == state


def test_shift_row_full_turn_is_identity():
    state = bytes(range(16))
    assert shift_row(state, 2, 4) == state
    assert shift_row(state, 3, 0) == state


def test_shift_row_three_equals_minus_one():
    state = bytes(range(16))
    assert shift_row(state, 3, 3) == shift_row(state, 3, -1)


def test_shift_row_rejects_bad_row():
    with pytest.raises(ValueError):
        shift_row(bytes(16), 4, 1)


def test_wrong_state_length_rejected():
    with pytest.raises(ValueError):
        sub_bytes(bytes(15))
    with pytest.raises(ValueError):
        add_round_key(bytes(16), bytes(17))


def test_aes_round_known_vector():
    state = bytes.fromhex("193de3bea0f4e22b9ac68d2ae9f84808")
    key = bytes.fromhex("a0fafe1788542cb123a339392a6c7605")
    assert aes_round(state, key) == bytes.fromhex("a49c7ff2689f352b6b5bea43026a5049")


def test_aes_inv_round_undoes_its_steps():
    state = bytes.fromhex("193de3bea0f4e22b9ac68d2ae9f84808")
    key = bytes.fromhex("a0fafe1788542cb123a339392a6c7605")
    result = aes_inv_round(state, key)
    recovered = shift_rows(sub_bytes(add_round_key(mix_columns(result), key)))
    assert recovered == state


def test_forward_and_inverse_steps_round_trip():
    state = bytes.fromhex("3243f6a8885a308d313198a2e0370734")
    assert inv_sub_bytes(sub_bytes(state)) == state
    assert inv_shift_rows(shift_rows(state)) == state
    assert inv_mix_columns(mix_columns(state)) == state