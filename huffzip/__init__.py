from .core import compress, compress_file, decompress, decompress_file
from .errors import DecodingError, EncodingError, FormatError, HuffzipError, IoFailure

__all__ = [
  'compress',
  'compress_file',
  'decompress',
  'decompress_file',
  'DecodingError',
  'EncodingError',
  'FormatError',
  'HuffzipError',
  'IoFailure',
]
