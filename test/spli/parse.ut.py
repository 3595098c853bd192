#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from utest import *
from spli.node import *
from spli.parse import *


a, b, c = Sym('a'), Sym('b'), Sym('c')


utest(Cons((a, b, c)), parse_text, '(a b c)')
utest(Quote(a), parse_text, "'a")
utest(Int(42), parse_text, '42')
utest(Str('hi'), parse_text, '"hi"')
utest(Sym("abc'def"), parse_text, "abc'def")
utest(Cons(), parse_text, '()')
utest(Cons((Cons(), Cons((Cons(),)))), parse_text, '(() (()))')
utest(Quote(Quote(a)), parse_text, "''a")
utest(Quasi(Cons((a, Unquote(b), Unquote(Sym('@c'))))), parse_text, '`(a ,b ,@c)')
utest(Cons((Sym('+'), Int(1), Str('two'), Quote(Cons((Sym('x'),))))), parse_text, "(+ 1 \"two\" '(x))")
utest(Int(7), parse_text, '007')
utest(Int(12345678901234567890), parse_text, '12345678901234567890')

# Failures.
utest(None, parse_text, '')
utest(None, parse_text, '   \n ')
utest(None, parse_text, '(a')
utest(None, parse_text, ')')
utest(None, parse_text, '((a)')
utest(None, parse_text, '"unterminated')
utest(None, parse_text, "('")

# A quoting prefix without a following expression still produces its node.
utest(Quote(), parse_text, "'")
utest(Unquote(), parse_text, ',')
utest(Quasi(), parse_text, '`)')
utest(Cons((Quote(),)), parse_text, "(')")

# Only the leading expression is parsed.
utest(a, parse_text, 'a b')
utest(Cons((a,)), parse_text, '(a) )')

# Multiple lines.
utest(Cons((a, b)), parse_text, '(a\nb)')
utest(Cons((Sym('define'), Cons((Sym('f'), Sym('x'))), Cons((Sym('+'), Sym('x'), Int(1))))),
  parse_text, '(define (f x)\n\n  (+ x 1))\n')

# Small rings at both levels.
utest(Cons((a, b, c, Sym('d'), Sym('e'))), parse_text, '(a b c d e)', cap=2)
utest(Cons((Sym('abcdefgh'), Str('ijklmnop'))), parse_text, '(abcdefgh "ijklmnop")', cap=3)


@utest_call
def test_parse_all() -> None:
  p = Parser.for_text('a (b) 3 "s"\n\'c')
  utest_seq([a, Cons((b,)), Int(3), Str('s'), Quote(c)], p.parse_all)
  utest(None, p.parse)


@utest_call
def test_parse_all_stops_at_failure() -> None:
  utest_seq([a, b], Parser.for_text('a b ) c').parse_all)


@utest_call
def test_failed_list_consumes_tokens() -> None:
  p = Parser.for_text('(a b')
  utest(None, p.parse)
  utest(None, p.parse)


@utest_call
def test_primitives() -> None:
  from spli.token import Token, TokenKind
  p = Parser.for_text('(x')
  utest(Token(TokenKind.PAREN_OPEN), p.peek)
  utest(False, p.match, TokenKind.PAREN_CLOSE)
  utest(Token(TokenKind.PAREN_OPEN), p.peek)
  utest(True, p.match, TokenKind.PAREN_OPEN)
  utest(Token(TokenKind.SYM, 'x'), p.advance)
  utest(None, p.peek)
  utest(None, p.advance)
  utest(False, p.match, TokenKind.SYM)


@utest_call
def test_bytes() -> None:
  utest(Sym('\xff'), Parser.for_bytes(b'\xff').parse)
  utest(Str('\xc3\xa9'), Parser.for_bytes('"é"'.encode()).parse)


@utest_call
def test_round_trip() -> None:
  texts = [
    '(a b c)',
    "'a",
    '42',
    '"hi"',
    '()',
    "(quote 'x `(y ,z))",
    '(define (f x) (if (< x 2) x (+ (f (- x 1)) (f (- x 2)))))',
    '(")" "(" "a b")',
    "abc'def",
    "(')",
  ]
  for text in texts:
    node = parse_text(text)
    utest_val(True, node is not None, desc=text)
    if node is None: continue
    utest(text, render, node)
    utest(node, parse_text, render(node))


@utest_call
def test_long_int() -> None:
  digits = '9' * 5000
  node = parse_text(digits)
  utest_val(True, isinstance(node, Int))
  utest(digits, render, node)
  utest_val(0, Int.from_digits(digits).value % 9)


@utest_call
def test_long_prefix_chain() -> None:
  text = "'`," * 1000 + 'a'
  node = parse_text(text)
  utest_val(True, isinstance(node, Quote))
  utest(text, render, node)
  utest(Quote(Quasi(Unquote(Quote()))), parse_text, "'`,'")


@utest_call
def test_dbg_tokens_stream() -> None:
  from spli.token import Token, TokenKind
  p = Parser.for_text('x', dbg_tokens=True)
  utest(Token(TokenKind.SYM, 'x'), p.pull)
  utest(None, p.pull)
