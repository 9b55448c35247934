class HuffzipError(Exception):
  pass

class IoFailure(HuffzipError):
  def __init__(self, message, path=None):
    super().__init__(message)
    self.path = path

class FormatError(HuffzipError):
  pass

class EncodingError(HuffzipError):
  def __init__(self, byte):
    super().__init__('byte ({}) not found in table'.format(byte))
    self.byte = byte

class DecodingError(HuffzipError):
  pass
