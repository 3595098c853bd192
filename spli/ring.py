# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Fixed-capacity circular FIFO, used for bounded lookahead over characters and tokens.
'''

from enum import Enum
from typing import final, Generic, Iterator, Sequence, TypeVar


_T = TypeVar('_T')

RING_DEFAULT_CAP = 1024


class RingCapacityError(AssertionError):
  'Raised when a batch write exceeds the remaining capacity of a Ring.'


@final
class Overflow(Enum):
  '''
  Policy applied when writing into a full ring.
  `drop_oldest`: the oldest unread item is overwritten and the read cursor advances past it;
  the length stays pinned at the capacity.
  '''
  drop_oldest = 0


class Ring(Generic[_T]):
  '''
  A bounded ring buffer.
  `read` and `peek` return None when the ring is empty; stored items must not be None.
  '''

  def __init__(self, cap:int=RING_DEFAULT_CAP, overflow:Overflow=Overflow.drop_oldest) -> None:
    assert cap > 0, cap
    self.cap = cap
    self.overflow = overflow
    self._buf:list[_T|None] = [None] * cap
    self._read = 0
    self._write = 0
    self._len = 0


  def __repr__(self) -> str:
    return f'{type(self).__name__}(cap={self.cap}, len={self._len}, items={list(self)!r})'


  def __len__(self) -> int: return self._len


  def __iter__(self) -> Iterator[_T]:
    'Iterate over the unread items, oldest first, without consuming them.'
    for i in range(self._len):
      item = self._buf[(self._read + i) % self.cap]
      assert item is not None
      yield item


  def is_empty(self) -> bool: return self._len == 0

  def is_full(self) -> bool: return self._len == self.cap


  def peek(self) -> _T|None:
    'Return the oldest item without consuming it, or None if empty.'
    if self._len == 0: return None
    assert 0 <= self._read < self.cap
    return self._buf[self._read]


  def read(self) -> _T|None:
    'Consume and return the oldest item, or None if empty.'
    if self._len == 0: return None
    idx = self._read
    assert 0 <= idx < self.cap
    item = self._buf[idx]
    self._buf[idx] = None
    self._read = (idx + 1) % self.cap
    self._len -= 1
    return item


  def write(self, item:_T) -> None:
    assert item is not None
    idx = self._write
    assert 0 <= idx < self.cap
    self._buf[idx] = item
    self._write = (idx + 1) % self.cap
    if self._len < self.cap:
      self._len += 1
    else: # Full: the write cursor coincides with the read cursor, so the oldest item was just overwritten.
      assert self.overflow is Overflow.drop_oldest
      self._read = self._write


  def write_many(self, items:Sequence[_T]) -> None:
    free = self.cap - self._len
    if len(items) > free:
      raise RingCapacityError(f'cannot write {len(items)} items into ring with {free} free slots')
    for item in items: self.write(item)
