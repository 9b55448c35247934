"""Command line driver.

    huffzip compress   [SOURCE] [DESTINATION]
    huffzip decompress [SOURCE] [DESTINATION]

SOURCE and DESTINATION default to stdin and stdout.
"""
import argparse
import logging
import sys

from .core import compress, decompress, read_all_bytes, write_all_bytes
from .errors import HuffzipError, IoFailure

log = logging.getLogger(__name__)

STDIO = '-'

def build_parser():
  parser = argparse.ArgumentParser(prog='huffzip', description='Static Huffman file compressor.')
  parser.add_argument('-v', '--verbose', action='count', default=0,
                      help='log progress, repeat for debug output')

  commands = parser.add_subparsers(dest='command', required=True)
  for name, summary in (('compress', 'pack SOURCE into an archive'),
                     ('decompress', 'expand an archive back into its original bytes')):
    command = commands.add_parser(name, help=summary)
    command.add_argument('source', nargs='?', default=STDIO, help='input file, - for stdin')
    command.add_argument('destination', nargs='?', default=STDIO, help='output file, - for stdout')

  return parser

def configure_logging(verbosity):
  levels = [logging.WARNING, logging.INFO, logging.DEBUG]
  logging.basicConfig(
    level=levels[min(verbosity, len(levels) - 1)],
    format='%(name)s: %(levelname)s: %(message)s',
    stream=sys.stderr,
  )

def read_input(path):
  if path != STDIO:
    return read_all_bytes(path)

  try:
    return sys.stdin.buffer.read()
  except OSError as exc:
    raise IoFailure('cannot read stdin: {}'.format(exc.strerror or exc), path=STDIO) from exc

def write_output(path, data):
  if path != STDIO:
    write_all_bytes(path, data)
    return

  try:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
  except OSError as exc:
    raise IoFailure('cannot write stdout: {}'.format(exc.strerror or exc), path=STDIO) from exc

def main(argv=None):
  args = build_parser().parse_args(argv)
  configure_logging(args.verbose)

  operation = compress if args.command == 'compress' else decompress

  try:
    data = read_input(args.source)
    result = operation(data)
    write_output(args.destination, result)
  except HuffzipError as exc:
    print('huffzip: error: {}'.format(exc), file=sys.stderr)
    return 1

  log.info('%s: %d bytes -> %d bytes', args.command, len(data), len(result))
  return 0
