# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Recursive descent parser for S-expressions.

Grammar, as ordered choice (the first alternative that succeeds wins):
  program = exp
  exp     = list | symbol | quote | quasi | unquote | int | str
  list    = "(" exp* ")"
  quote   = "'" exp
  quasi   = "`" exp
  unquote = "," exp
  symbol  = SYM
  int     = INT
  str     = STR

Failure is signaled by returning None. Tokens consumed by a failed alternative are not restored,
so after a failed parse the position of the token stream is not meaningful.
'''

from typing import BinaryIO, Callable, Iterator

from .io import tee_to_err
from .lex import Tokenizer
from .node import Cons, Int, Node, Prefixed, Quasi, Quote, Str, Sym, Unquote
from .optional import unwrap
from .ring import Ring, RING_DEFAULT_CAP
from .token import Token, TokenKind


prefix_types:dict[TokenKind,type[Prefixed]] = {
  TokenKind.QUOTE: Quote,
  TokenKind.GRAVE: Quasi,
  TokenKind.COMMA: Unquote,
}


class Parser:

  def __init__(self, tokenizer:Tokenizer, cap:int=RING_DEFAULT_CAP, dbg_tokens=False) -> None:
    self.tokenizer = tokenizer
    self.ring:Ring[Token] = Ring(cap)
    self.dbg_tokens = dbg_tokens
    self.stream:Iterator[Token|None] = tokenizer.stream()
    if dbg_tokens:
      self.stream = tee_to_err(self.stream, label='Parser dbg_tokens')
    self.exp_rules:tuple[Callable[[], Node|None],...] = (
      self.parse_list,
      self.parse_symbol,
      self.parse_quote,
      self.parse_quasi,
      self.parse_unquote,
      self.parse_int,
      self.parse_str,
    )


  @classmethod
  def for_file(cls, file:BinaryIO, cap:int=RING_DEFAULT_CAP, dbg_tokens=False) -> 'Parser':
    return cls(Tokenizer(file, cap=cap), cap=cap, dbg_tokens=dbg_tokens)

  @classmethod
  def for_bytes(cls, data:bytes, cap:int=RING_DEFAULT_CAP, dbg_tokens=False) -> 'Parser':
    return cls(Tokenizer.for_bytes(data, cap=cap), cap=cap, dbg_tokens=dbg_tokens)

  @classmethod
  def for_text(cls, text:str, cap:int=RING_DEFAULT_CAP, dbg_tokens=False) -> 'Parser':
    return cls(Tokenizer.for_text(text, cap=cap), cap=cap, dbg_tokens=dbg_tokens)


  def parse(self) -> Node|None:
    'Parse a single program; None means there was no valid leading expression.'
    return self.parse_program()


  def parse_all(self) -> Iterator[Node]:
    'Parse successive top-level expressions until a parse fails or the input is exhausted.'
    while (node := self.parse()) is not None:
      yield node


  # Token stream.

  def pull(self) -> Token|None: return next(self.stream)


  def ensure(self) -> None:
    'If the token ring has drained, refill it from the tokenizer until it is full or the tokenizer returns None.'
    if not self.ring.is_empty(): return
    while not self.ring.is_full():
      token = self.pull()
      if token is None: return
      self.ring.write(token)


  def peek(self) -> Token|None:
    self.ensure()
    return self.ring.peek()


  def advance(self) -> Token|None:
    self.ensure()
    return self.ring.read()


  def match(self, kind:TokenKind) -> bool:
    'Consume the next token and return True if it is of `kind`; otherwise leave the stream untouched.'
    token = self.peek()
    if token is None or token.kind is not kind: return False
    self.ring.read()
    return True


  def match_text(self, kind:TokenKind) -> str|None:
    'Consume the next token and return its text if it is of `kind`.'
    token = self.peek()
    if token is None or token.kind is not kind: return None
    return unwrap(self.advance()).text


  # Rules.

  def parse_program(self) -> Node|None:
    return self.parse_exp()


  def parse_exp(self) -> Node|None:
    for rule in self.exp_rules:
      node = rule()
      if node is not None: return node
    return None


  def parse_list(self) -> Cons|None:
    if not self.match(TokenKind.PAREN_OPEN): return None
    children:list[Node] = []
    while (child := self.parse_exp()) is not None:
      children.append(child)
    if not self.match(TokenKind.PAREN_CLOSE): return None
    return Cons(tuple(children))


  def parse_prefixed(self, kind:TokenKind, node_type:type[Prefixed]) -> Prefixed|None:
    'A prefix with no following expression still produces a node, with no child.'
    if not self.match(kind): return None
    # Consecutive prefixes are collected here rather than by recursing through parse_exp.
    node_types = [node_type]
    while (token := self.peek()) is not None and token.kind in prefix_types:
      self.advance()
      node_types.append(prefix_types[token.kind])
    node:Node|None = self.parse_exp()
    for t in reversed(node_types):
      node = t(node)
    return node


  def parse_quote(self) -> Prefixed|None: return self.parse_prefixed(TokenKind.QUOTE, Quote)

  def parse_quasi(self) -> Prefixed|None: return self.parse_prefixed(TokenKind.GRAVE, Quasi)

  def parse_unquote(self) -> Prefixed|None: return self.parse_prefixed(TokenKind.COMMA, Unquote)


  def parse_symbol(self) -> Sym|None:
    text = self.match_text(TokenKind.SYM)
    return None if text is None else Sym(text)


  def parse_int(self) -> Int|None:
    text = self.match_text(TokenKind.INT)
    return None if text is None else Int.from_digits(text)


  def parse_str(self) -> Str|None:
    text = self.match_text(TokenKind.STR)
    return None if text is None else Str(text)


def parse_text(text:str, cap:int=RING_DEFAULT_CAP) -> Node|None:
  return Parser.for_text(text, cap=cap).parse()
