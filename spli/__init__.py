# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
spli is a streaming reader for a small Lisp surface syntax:
S-expressions with quote, quasiquote and unquote sugar, symbols, integers and strings.

Data flows one way: byte source -> character ring -> Tokenizer -> token ring -> Parser -> Node.
'''

from .lex import lex_text, Tokenizer
from .node import Cons, Int, Node, NodeKind, Quasi, Quote, render, Str, Sym, Unquote
from .parse import parse_text, Parser
from .ring import Overflow, Ring, RING_DEFAULT_CAP
from .token import Token, TokenKind
