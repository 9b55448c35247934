"""Frequency analysis, Huffman tree construction and code assignment.

The tree is never stored in an archive; it is rebuilt from the frequency
table, so every ordering decision here has to depend on the table alone.
"""
import heapq
import logging

from collections import Counter, namedtuple

log = logging.getLogger(__name__)

Leaf = namedtuple('Leaf', ('byte', 'count'))
Node = namedtuple('Node', ('left', 'right', 'count'))

# Ranks of merged nodes start after the last possible byte value
FIRST_NODE_RANK = 256

def analyze(data):
  return dict(Counter(bytes(data)))

def build_tree(table):
  heap = []
  for byte, count in table.items():
    check_entry(byte, count)
    heap.append((count, byte, Leaf(byte=byte, count=count)))

  if not heap:
    return None

  heapq.heapify(heap)
  rank = FIRST_NODE_RANK

  while len(heap) > 1:
    left_count, _, left = heapq.heappop(heap)
    right_count, _, right = heapq.heappop(heap)

    parent = Node(left=left, right=right, count=left_count + right_count)
    heapq.heappush(heap, (parent.count, rank, parent))
    rank += 1

  log.debug('built tree from %d symbols with %d merges', len(table), rank - FIRST_NODE_RANK)
  return heap[0][2]

def check_entry(byte, count):
  if not 0 <= byte <= 255:
    raise ValueError('byte ({}) out of range'.format(byte))
  if count < 1:
    raise ValueError('byte ({}) has non-positive count {}'.format(byte, count))

def build_table(root):
  if root is None:
    return {}

  # A lone leaf still needs one bit per occurrence
  if isinstance(root, Leaf):
    return {root.byte: '0'}

  table = {}
  stack = [(root, '')]

  while stack:
    node, path = stack.pop()
    if isinstance(node, Node):
      stack.append((node.right, path + '1'))
      stack.append((node.left, path + '0'))
    else:
      table[node.byte] = path

  return table
