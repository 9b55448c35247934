"""Archive layout.

    magic       4 bytes
    version     1 byte
    entry count varint
    entries     entry count x (byte value: 1 byte, count: varint)
    total bits  varint
    payload     ceil(total bits / 8) bytes, most significant bit first

Varints are unsigned LEB128.
"""
import logging
import struct

from bitarray import bitarray

from .bits import BitSequence
from .errors import FormatError
from .tree import check_entry

log = logging.getLogger(__name__)

MAGIC = b'HUFZ'
VERSION = 1
MAX_ENTRIES = 256
MAX_VARINT_BYTES = 10

class ArchivePacker:
  def __init__(self):
    self.buffer = bitarray(endian='big')

  def raw(self, data):
    self.buffer.frombytes(data)

  def uint8(self, uint8):
    self.buffer.frombytes(struct.pack('B', uint8))

  def varint(self, value):
    if value < 0:
      raise ValueError('varint must be non-negative, got {}'.format(value))

    while True:
      byte = value & 0x7f
      value >>= 7
      if value:
        self.uint8(byte | 0x80)
      else:
        self.uint8(byte)
        return

  def bits(self, bits):
    self.buffer.extend(bits.buffer)

  def pack(self):
    return self.buffer.tobytes()

class ArchiveUnpacker:
  def __init__(self, data):
    self.data = bytes(data)
    self.position = 0

  def remaining(self):
    return len(self.data) - self.position

  def raw(self, length, what):
    if self.remaining() < length:
      raise FormatError('archive truncated while reading {}'.format(what))
    chunk = self.data[self.position:self.position + length]
    self.position += length
    return chunk

  def uint8(self, what):
    return struct.unpack('B', self.raw(1, what))[0]

  def varint(self, what):
    value = 0
    for shift in range(0, MAX_VARINT_BYTES * 7, 7):
      byte = self.uint8(what)
      value |= (byte & 0x7f) << shift
      if not byte & 0x80:
        return value

    raise FormatError('{} is longer than {} bytes'.format(what, MAX_VARINT_BYTES))

  def bits(self, length):
    expected = (length + 7) // 8
    if self.remaining() != expected:
      raise FormatError('payload holds {} bytes, {} bits need {}'.format(self.remaining(), length, expected))

    bits = BitSequence.frombytes(self.raw(expected, 'payload'), length)
    if expected and bits.tobytes() != self.data[-expected:]:
      raise FormatError('payload padding bits are not zero')
    return bits

def serialize(table, bits):
  if len(table) > MAX_ENTRIES:
    raise ValueError('table has {} entries'.format(len(table)))

  packer = ArchivePacker()
  packer.raw(MAGIC)
  packer.uint8(VERSION)

  packer.varint(len(table))
  for byte in sorted(table):
    check_entry(byte, table[byte])
    packer.uint8(byte)
    packer.varint(table[byte])

  packer.varint(len(bits))
  packer.bits(bits)

  archive = packer.pack()
  log.debug('serialized %d entries and %d bits into %d bytes', len(table), len(bits), len(archive))
  return archive

def deserialize(data):
  unpacker = ArchiveUnpacker(data)

  if unpacker.raw(len(MAGIC), 'magic') != MAGIC:
    raise FormatError('not a huffzip archive')

  version = unpacker.uint8('version')
  if version != VERSION:
    raise FormatError('unsupported archive version {}'.format(version))

  entry_count = unpacker.varint('entry count')
  if entry_count > MAX_ENTRIES:
    raise FormatError('entry count {} exceeds {}'.format(entry_count, MAX_ENTRIES))

  table = unpack_table(unpacker, entry_count)

  # Every symbol costs at least one bit
  total_bits = unpacker.varint('total bits')
  if total_bits < sum(table.values()) or (total_bits and not table):
    raise FormatError('{} bits cannot hold {} symbols'.format(total_bits, sum(table.values())))

  bits = unpacker.bits(total_bits)

  log.debug('deserialized %d entries and %d bits', len(table), len(bits))
  return table, bits

def unpack_table(unpacker, entry_count):
  table = {}

  for _ in range(entry_count):
    byte = unpacker.uint8('entry byte')
    count = unpacker.varint('count of byte ({})'.format(byte))

    if byte in table:
      raise FormatError('byte ({}) appears twice in table'.format(byte))
    if count < 1:
      raise FormatError('byte ({}) has zero count'.format(byte))

    table[byte] = count

  return table
