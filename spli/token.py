# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Immutable Token class.
'''

from enum import Enum


class TokenKind(Enum):
  PAREN_OPEN = '('
  PAREN_CLOSE = ')'
  QUOTE = "'"
  COMMA = ','
  GRAVE = '`'
  SYM = 'sym'
  STR = 'str'
  INT = 'int'

  @property
  def has_text(self) -> bool: return self in _text_kinds


_text_kinds = frozenset((TokenKind.SYM, TokenKind.STR, TokenKind.INT))

_setattr = object.__setattr__


class Token:
  '''
  A lexical token. SYM, STR and INT tokens carry their text;
  INT text is the decimal digit string, converted by the parser.
  '''
  __slots__ = ('kind', 'text')
  kind:TokenKind
  text:str

  def __init__(self, kind:TokenKind, text:str='') -> None:
    assert kind.has_text or not text, (kind, text)
    _setattr(self, 'kind', kind)
    _setattr(self, 'text', text)

  def __setattr__(self, name:str, val:object) -> None:
    raise AttributeError(f'{type(self).__qualname__} is immutable')

  def __repr__(self) -> str:
    if self.kind.has_text: return f'{type(self).__qualname__}({self.kind.name}, {self.text!r})'
    return f'{type(self).__qualname__}({self.kind.name})'

  def __str__(self) -> str:
    'The token as it would appear in canonical source text.'
    if self.kind is TokenKind.STR: return f'"{self.text}"'
    if self.kind.has_text: return self.text
    return self.kind.value

  def __eq__(self, other:object) -> bool:
    if not isinstance(other, Token): return NotImplemented
    return self.kind is other.kind and self.text == other.text

  def __hash__(self) -> int: return hash((self.kind, self.text))
