# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from sys import stdin
from typing import BinaryIO

from ..io import outL, outL_latin1
from ..lex import Tokenizer
from ..parse import Parser


def main(argv:list[str]|None=None) -> None:
  parser = ArgumentParser(prog='spli', add_help=False,
    description='Read an S-expression and print it in canonical form.')
  parser.add_argument('path', nargs='?', help="Path to the source file, or '-' for stdin.")
  parser.add_argument('-dbg', action='store_true', help='Echo tokens to stderr while parsing.')
  parser.add_argument('-tokens', action='store_true', help='Print the token stream instead of parsing.')
  parser.add_argument('-all', action='store_true', help='Print every top-level expression.')
  args = parser.parse_args(argv)

  if args.path is None:
    usage()
    exit(1)

  if args.tokens and args.all: exit('`-tokens` and `-all` are mutually exclusive.')

  if args.path == '-':
    exit(read(stdin.buffer, tokens=args.tokens, every=args.all, dbg=args.dbg))
  try: f = open(args.path, 'rb')
  except FileNotFoundError:
    exit(f'spli error: no such file: {args.path!r}')
  with f:
    exit(read(f, tokens=args.tokens, every=args.all, dbg=args.dbg))


def usage() -> None:
  outL('Usage:')
  outL('  spli <filepath>')


def read(f:BinaryIO, tokens:bool, every:bool, dbg:bool) -> int:
  'Read from `f` and print the results; return the process exit status.'
  if tokens:
    for token in Tokenizer(f):
      outL_latin1(token)
    return 0

  parser = Parser.for_file(f, dbg_tokens=dbg)
  if every:
    count = 0
    for node in parser.parse_all():
      outL_latin1(node)
      count += 1
    return 0 if count else 1

  node = parser.parse()
  if node is None: return 1
  outL_latin1(node)
  return 0


if __name__ == '__main__': main()
