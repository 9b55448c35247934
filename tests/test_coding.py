import pytest

from huffzip.bits import BitSequence
from huffzip.coding import decode, encode, look_up_byte
from huffzip.errors import DecodingError, EncodingError
from huffzip.tree import analyze, build_table, build_tree


def _tree_and_codes(data):
	tree = build_tree(analyze(data))
	return tree, build_table(tree)


def test_encode_aaab():
	_, codes = _tree_and_codes(b'AAAB')
	bits = encode(b'AAAB', codes)
	assert bits.to01() == '1110'


def test_decode_aaab():
	tree, _ = _tree_and_codes(b'AAAB')
	assert decode(BitSequence('1110'), tree, 4) == b'AAAB'


def test_single_symbol_uses_one_bit_per_occurrence():
	tree, codes = _tree_and_codes(b'\x42' * 5)
	bits = encode(b'\x42' * 5, codes)

	assert bits.to01() == '00000'
	assert decode(bits, tree, 5) == b'\x42' * 5


def test_encode_missing_byte():
	with pytest.raises(EncodingError) as info:
		encode(b'AC', {0x41: '0', 0x42: '1'})
	assert info.value.byte == 0x43


def test_look_up_byte():
	assert look_up_byte({0x41: '01'}, 0x41) == '01'
	with pytest.raises(EncodingError):
		look_up_byte({}, 0x41)


def test_decode_empty():
	assert decode(BitSequence(), None, 0) == b''


def test_decode_bits_without_tree():
	with pytest.raises(DecodingError):
		decode(BitSequence('0'), None, 0)


def test_decode_ends_mid_code():
	data = b'ABCD'
	tree, codes = _tree_and_codes(data)
	bits = encode(data, codes)
	truncated = BitSequence(bits.to01()[:-1])

	with pytest.raises(DecodingError):
		decode(truncated, tree, 4)


def test_decode_symbol_count_mismatch():
	tree, _ = _tree_and_codes(b'AAAB')
	with pytest.raises(DecodingError):
		decode(BitSequence('11'), tree, 4)


@pytest.mark.parametrize('bits', ['0000', '000000', '00100'])
def test_decode_single_symbol_rejects_wrong_bits(bits):
	tree, _ = _tree_and_codes(b'\x42' * 5)
	with pytest.raises(DecodingError):
		decode(BitSequence(bits), tree, 5)
