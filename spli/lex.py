# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Character-level tokenizer.
The source is read one line at a time into a bounded character ring;
`lex` pulls characters from the ring and produces one token per call.
Bytes are treated as raw 8-bit code units: each byte becomes the character with the same ordinal.
'''

from io import BytesIO
from typing import BinaryIO, Iterator

from .ring import Ring, RING_DEFAULT_CAP
from .token import Token, TokenKind


punctuation_kinds = {
  '(': TokenKind.PAREN_OPEN,
  ')': TokenKind.PAREN_CLOSE,
  '`': TokenKind.GRAVE,
  "'": TokenKind.QUOTE,
  ',': TokenKind.COMMA,
}

skipped_chars = frozenset(' \t\n')

reserved_chars = frozenset(' \t\n\v\f\r()')

digit_chars = frozenset('0123456789')


def is_reserved(c:str) -> bool:
  'Reserved characters end a symbol. Note that quote, comma and grave are not reserved.'
  return c in reserved_chars


class Tokenizer:

  def __init__(self, source:BinaryIO, cap:int=RING_DEFAULT_CAP) -> None:
    self.source = source
    self.ring:Ring[str] = Ring(cap)
    self.split = False # True when the last refill stopped because the ring filled, mid-line.
    self.at_end = False # True once the source is exhausted.


  @classmethod
  def for_bytes(cls, data:bytes, cap:int=RING_DEFAULT_CAP) -> 'Tokenizer':
    return cls(BytesIO(data), cap=cap)


  @classmethod
  def for_text(cls, text:str, cap:int=RING_DEFAULT_CAP) -> 'Tokenizer':
    return cls(BytesIO(text.encode()), cap=cap)


  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.source!r}, ring={self.ring!r})'


  def __iter__(self) -> Iterator[Token]:
    'Yield tokens until `lex` returns None.'
    while (token := self.lex()) is not None:
      yield token


  def stream(self) -> Iterator[Token|None]:
    'Yield the result of each `lex` call indefinitely; None marks an absent token, and lexing may resume after it.'
    while True:
      yield self.lex()


  def ensure(self) -> None:
    '''
    If the ring has drained, refill it from the source until the ring is full,
    the source is exhausted, or a line terminator is read.
    The terminator is consumed but not buffered.
    '''
    if not self.ring.is_empty(): return
    self.split = False
    while not self.ring.is_full():
      b = self.source.read(1)
      if not b:
        self.at_end = True
        return
      if b == b'\n': return
      self.ring.write(chr(b[0]))
    self.split = True


  def peek_cont(self) -> str|None:
    'Peek at the next character of the current line, refilling if the line was split by the ring capacity.'
    if self.split: self.ensure()
    return self.ring.peek()


  def lex(self) -> Token|None:
    '''
    Produce the next token, or None at end of input or for an unterminated string.
    '''
    while True:
      self.ensure()
      c = self.ring.read()
      if c is None:
        if self.at_end: return None
        continue # Blank line.
      if c not in skipped_chars: break

    try: return Token(punctuation_kinds[c])
    except KeyError: pass

    if c == '"': return self.lex_str()
    if c in digit_chars: return self.lex_int(c)
    return self.lex_sym(c)


  def lex_str(self) -> Token|None:
    chars:list[str] = []
    while (c := self.peek_cont()) is not None:
      self.ring.read()
      if c == '"': return Token(TokenKind.STR, ''.join(chars))
      chars.append(c)
    return None # Unterminated.


  def lex_int(self, first:str) -> Token:
    chars = [first]
    while (c := self.peek_cont()) is not None and c in digit_chars:
      self.ring.read()
      chars.append(c)
    return Token(TokenKind.INT, ''.join(chars))


  def lex_sym(self, first:str) -> Token:
    chars = [] if is_reserved(first) else [first]
    while (c := self.peek_cont()) is not None and not is_reserved(c):
      self.ring.read()
      chars.append(c)
    return Token(TokenKind.SYM, ''.join(chars))


def lex_text(text:str, cap:int=RING_DEFAULT_CAP) -> list[Token]:
  'Tokenize `text` completely, stopping at the first absent token.'
  return list(Tokenizer.for_text(text, cap=cap))
