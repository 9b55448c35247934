import logging

from .bits import BitSequence
from .errors import DecodingError, EncodingError
from .tree import Leaf

log = logging.getLogger(__name__)

def encode(data, table):
  bits = BitSequence()

  for byte in bytes(data):
    bits.append_bits(look_up_byte(table, byte))

  log.debug('encoded %d bytes into %d bits', len(data), len(bits))
  return bits

def look_up_byte(table, byte):
  try:
    return table[byte]
  except KeyError:
    raise EncodingError(byte) from None

def decode(bits, root, total):
  if root is None:
    if len(bits) or total:
      raise DecodingError('{} bits and {} symbols but no tree'.format(len(bits), total))
    return b''

  if isinstance(root, Leaf):
    return decode_single(bits, root, total)

  output = bytearray()
  node = root

  for bit in bits:
    node = node.right if bit else node.left
    if isinstance(node, Leaf):
      output.append(node.byte)
      node = root

  if node is not root:
    raise DecodingError('bit sequence ended in the middle of a code')
  if len(output) != total:
    raise DecodingError('decoded {} bytes, expected {}'.format(len(output), total))

  return bytes(output)

def decode_single(bits, leaf, total):
  if len(bits) != total:
    raise DecodingError('{} bits for {} occurrences of byte ({})'.format(len(bits), total, leaf.byte))

  for index, bit in enumerate(bits):
    if bit:
      raise DecodingError('unexpected 1 bit at {} for a single symbol tree'.format(index))

  return bytes([leaf.byte]) * total
