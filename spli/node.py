# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Syntax tree nodes.
Each variant is a frozen dataclass; `Node` is their union.
Nodes own their children exclusively, so a parsed result is always a tree.
'''

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from sys import get_int_max_str_digits, set_int_max_str_digits
from typing import ClassVar, Iterator, Union


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
  'Lift the interpreter limit on integer string conversion, which would reject long integer literals.'
  limit = get_int_max_str_digits()
  set_int_max_str_digits(0)
  try: yield
  finally: set_int_max_str_digits(limit)


class NodeKind(Enum):
  CONS = 'cons'
  SYM = 'sym'
  STR = 'str'
  INT = 'int'
  QUOTE = 'quote'
  QUASI = 'quasi'
  UNQUOTE = 'unquote'


@dataclass(frozen=True)
class Cons:
  kind:ClassVar[NodeKind] = NodeKind.CONS
  children:tuple['Node',...] = ()

  def __str__(self) -> str: return '(' + ' '.join(str(c) for c in self.children) + ')'


@dataclass(frozen=True)
class Sym:
  kind:ClassVar[NodeKind] = NodeKind.SYM
  text:str

  def __str__(self) -> str: return self.text


@dataclass(frozen=True)
class Str:
  kind:ClassVar[NodeKind] = NodeKind.STR
  text:str

  def __str__(self) -> str: return f'"{self.text}"'


@dataclass(frozen=True)
class Int:
  kind:ClassVar[NodeKind] = NodeKind.INT
  value:int

  @classmethod
  def from_digits(cls, digits:str) -> 'Int':
    with unlimited_int_digits(): return cls(int(digits))

  def __str__(self) -> str:
    with unlimited_int_digits(): return str(self.value)


@dataclass(frozen=True)
class Prefixed:
  '''
  Abstract base for the quoting forms: Quote, Quasi and Unquote.
  `child` is None only when the prefix character was not followed by an expression.
  '''
  prefix:ClassVar[str] = ''
  child:Union['Node',None] = None

  def __post_init__(self) -> None:
    if not self.prefix: raise TypeError(f'{type(self).__name__} is abstract; use Quote, Quasi or Unquote')

  def __str__(self) -> str:
    # Prefix chains are unbounded; render them without recursion.
    prefixes:list[str] = []
    node:Union['Node',Prefixed,None] = self
    while isinstance(node, Prefixed):
      prefixes.append(node.prefix)
      node = node.child
    return ''.join(prefixes) + ('' if node is None else str(node))

  @property
  def children(self) -> tuple['Node',...]:
    return () if self.child is None else (self.child,)


@dataclass(frozen=True)
class Quote(Prefixed):
  kind:ClassVar[NodeKind] = NodeKind.QUOTE
  prefix:ClassVar[str] = "'"


@dataclass(frozen=True)
class Quasi(Prefixed):
  kind:ClassVar[NodeKind] = NodeKind.QUASI
  prefix:ClassVar[str] = '`'


@dataclass(frozen=True)
class Unquote(Prefixed):
  kind:ClassVar[NodeKind] = NodeKind.UNQUOTE
  prefix:ClassVar[str] = ','


Node = Union[Cons, Sym, Str, Int, Quote, Quasi, Unquote]


def render(node:Node) -> str:
  'Render `node` as canonical source text.'
  return str(node)
