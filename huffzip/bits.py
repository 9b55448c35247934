from bitarray import bitarray

class BitSequence:
  """Growable bit buffer packed 8 bits per byte, most significant bit first."""

  def __init__(self, bits=None):
    self.buffer = bitarray(endian='big')
    if bits is not None:
      self.append_bits(bits)

  @classmethod
  def frombytes(cls, data, length):
    if length < 0 or length > len(data) * 8:
      raise ValueError('{} bits requested from {} bytes'.format(length, len(data)))

    sequence = cls()
    sequence.buffer.frombytes(bytes(data))
    del sequence.buffer[length:]
    return sequence

  def append_bits(self, code):
    if isinstance(code, BitSequence):
      code = code.buffer
    self.buffer.extend(code)

  def bit_at(self, index):
    if not 0 <= index < len(self.buffer):
      raise IndexError('bit index {} out of range'.format(index))
    return self.buffer[index]

  def tobytes(self):
    # bitarray pads the final byte with zeros
    return self.buffer.tobytes()

  def to01(self):
    return self.buffer.to01()

  def __len__(self):
    return len(self.buffer)

  def __iter__(self):
    return iter(self.buffer)

  def __eq__(self, other):
    if not isinstance(other, BitSequence):
      return NotImplemented
    return self.buffer == other.buffer

  def __repr__(self):
    return 'BitSequence({!r})'.format(self.buffer.to01())
