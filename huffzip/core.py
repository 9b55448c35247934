import logging

from .archive import deserialize, serialize
from .coding import decode, encode
from .errors import IoFailure
from .tree import analyze, build_table, build_tree

log = logging.getLogger(__name__)

def compress(original):
  table = analyze(original)
  tree = build_tree(table)
  codes = build_table(tree)

  bits = encode(original, codes)
  return serialize(table, bits)

def decompress(compressed):
  table, bits = deserialize(compressed)
  tree = build_tree(table)

  return decode(bits, tree, sum(table.values()))

def compress_file(source, destination):
  original = read_all_bytes(source)
  compressed = compress(original)
  write_all_bytes(destination, compressed)

  log.debug('compressed %s (%d bytes) to %s (%d bytes)', source, len(original), destination, len(compressed))
  return len(original), len(compressed)

def decompress_file(source, destination):
  compressed = read_all_bytes(source)
  original = decompress(compressed)
  write_all_bytes(destination, original)

  log.debug('decompressed %s (%d bytes) to %s (%d bytes)', source, len(compressed), destination, len(original))
  return len(compressed), len(original)

def read_all_bytes(path):
  try:
    with open(path, 'rb') as source:
      return source.read()
  except OSError as exc:
    raise IoFailure('cannot read {}: {}'.format(path, exc.strerror or exc), path=path) from exc

def write_all_bytes(path, data):
  try:
    with open(path, 'wb') as destination:
      destination.write(data)
  except OSError as exc:
    raise IoFailure('cannot write {}: {}'.format(path, exc.strerror or exc), path=path) from exc
