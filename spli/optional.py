# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Optional values are plain `T|None`; the contained value itself is never None.
These helpers name the checked-extraction contract used throughout the reader.
'''

from typing import TypeVar


_T = TypeVar('_T')


class UnwrapError(AssertionError):
  'Raised when an absent optional is unwrapped. This is a programming error, not a parse failure.'


def is_some(optional:_T|None) -> bool: return optional is not None

def is_none(optional:_T|None) -> bool: return optional is None


def unwrap(optional:_T|None) -> _T:
  if optional is None: raise UnwrapError('unexpected None')
  return optional


def opt_eq(a:_T|None, b:_T|None) -> bool:
  'Two absent values are equal; an absent and a present value are not; otherwise compare the values.'
  if a is None or b is None: return a is b
  return bool(a == b)
