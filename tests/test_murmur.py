import string

import pytest

from rdfsnips.murmur import hex_digest, murmur3_x64_128

FOX = b"The quick brown fox jumps over the lazy dog"


def test_empty_input_hashes_to_zero():
    assert murmur3_x64_128(b"") == bytes(16)


def test_known_vector():
    digest = murmur3_x64_128(FOX)
    assert int.from_bytes(digest[:8], "little") == 0xE34BBC7BBC071B6C
    assert int.from_bytes(digest[8:], "little") == 0x7A433CA9C49A9347


def test_hex_digest_swaps_nibbles():
    assert hex_digest(FOX)[:2] == "c6"
    assert hex_digest(b"") == "0" * 32


@pytest.mark.parametrize("size", range(0, 41))
def test_digest_length_for_all_tail_sizes(size):
    data = bytes(range(size))
    assert len(murmur3_x64_128(data)) == 16
    text = hex_digest(data)
    assert len(text) == 32
    assert set(text) <= set(string.hexdigits.lower())


def test_all_prefix_lengths_hash_differently():
    data = bytes(range(1, 41))
    digests = {murmur3_x64_128(data[:n]) for n in range(len(data) + 1)}
    assert len(digests) == len(data) + 1


def test_buffer_types_agree():
    assert murmur3_x64_128(bytearray(FOX)) == murmur3_x64_128(FOX)
    assert murmur3_x64_128(memoryview(FOX)) == murmur3_x64_128(FOX)


def test_deterministic():
    assert hex_digest(b"abc") == hex_digest(b"abc")
    assert hex_digest(b"abc") != hex_digest(b"abd")