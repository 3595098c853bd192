# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sys import stderr, stdout
from typing import Any, Callable, Iterable, Iterator, TypeVar


_T = TypeVar('_T')


def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, flush=flush)


def outL_latin1(*items:Any, sep='') -> None:
  '''
  Write `items` to std out as latin-1 bytes; sep='', end='\\n'.
  Characters read from raw bytes are thereby written back as the same bytes.
  '''
  text = sep.join(str(i) for i in items) + '\n'
  try: buffer = stdout.buffer
  except AttributeError: # In-memory text stream.
    stdout.write(text)
    return
  stdout.flush()
  buffer.write(text.encode('latin-1'))
  buffer.flush()


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


def tee_to_err(iterable:Iterable[_T], label:str='tee_to_err', transform:Callable[[_T],Any]|None=None) -> Iterator[_T]:
  for el in iterable:
    s = repr(el) if transform is None else str(transform(el))
    errL(label, ': ', s)
    yield el
