import pytest

from huffzip.bits import BitSequence


def test_append_and_read_back():
	bits = BitSequence()
	bits.append_bits('101')
	bits.append_bits('0011')

	assert len(bits) == 7
	assert [bits.bit_at(i) for i in range(7)] == [1, 0, 1, 0, 0, 1, 1]
	assert list(bits) == [1, 0, 1, 0, 0, 1, 1]


def test_length_is_counted_in_bits_not_bytes():
	bits = BitSequence('1' * 9)
	assert len(bits) == 9
	assert len(bits.tobytes()) == 2


def test_packs_most_significant_bit_first_with_zero_padding():
	bits = BitSequence('1110')
	assert bits.tobytes() == b'\xe0'


def test_frombytes_keeps_only_requested_length():
	bits = BitSequence.frombytes(b'\xe0', 4)
	assert bits.to01() == '1110'
	assert bits == BitSequence('1110')


def test_frombytes_rejects_missing_bits():
	with pytest.raises(ValueError):
		BitSequence.frombytes(b'\x00', 9)


@pytest.mark.parametrize('index', [-1, 3])
def test_bit_at_out_of_range(index):
	bits = BitSequence('010')
	with pytest.raises(IndexError):
		bits.bit_at(index)


def test_empty_sequence():
	bits = BitSequence()
	assert len(bits) == 0
	assert bits.tobytes() == b''
