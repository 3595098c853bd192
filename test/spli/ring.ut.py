#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from utest import *
from spli.ring import *


@utest_call
def test_empty() -> None:
  r:Ring[str] = Ring(cap=3)
  utest_val(3, r.cap)
  utest_val(0, len(r))
  utest(True, r.is_empty)
  utest(False, r.is_full)
  utest(None, r.peek)
  utest(None, r.read)
  utest_val(Overflow.drop_oldest, r.overflow)


@utest_call
def test_fifo() -> None:
  r:Ring[str] = Ring(cap=3)
  r.write('a')
  r.write('b')
  utest_val(2, len(r))
  utest('a', r.peek)
  utest('a', r.peek)
  utest('a', r.read)
  utest('b', r.read)
  utest(None, r.read)
  utest(True, r.is_empty)


@utest_call
def test_wrap() -> None:
  r:Ring[int] = Ring(cap=3)
  r.write_many([1, 2, 3])
  utest(True, r.is_full)
  utest(1, r.read)
  r.write(4)
  utest_seq([2, 3, 4], iter, r)
  utest(2, r.read)
  utest(3, r.read)
  r.write(5)
  utest(4, r.read)
  utest(5, r.read)
  utest(True, r.is_empty)


@utest_call
def test_drop_oldest() -> None:
  r:Ring[int] = Ring(cap=4)
  r.write_many([0, 1, 2, 3])
  r.write(4)
  utest_val(4, len(r))
  utest(True, r.is_full)
  utest(1, r.peek)
  utest(1, r.read)
  utest_seq([2, 3, 4], iter, r)


@utest_call
def test_drop_oldest_default_cap() -> None:
  r:Ring[int] = Ring()
  utest_val(RING_DEFAULT_CAP, r.cap)
  for i in range(RING_DEFAULT_CAP): r.write(i)
  utest(True, r.is_full)
  r.write(RING_DEFAULT_CAP)
  utest_val(RING_DEFAULT_CAP, len(r))
  utest(1, r.read)
  utest(2, r.read)


@utest_call
def test_write_many_capacity() -> None:
  r:Ring[int] = Ring(cap=2)
  r.write(0)
  utest_exc(RingCapacityError, r.write_many, [1, 2])
  utest_exc(AssertionError, r.write_many, [1, 2])
  utest_val(1, len(r))
  r.write_many([1])
  utest(True, r.is_full)
  r.write_many([])
  utest_seq([0, 1], iter, r)


@utest_call
def test_repr() -> None:
  r:Ring[int] = Ring(cap=2)
  r.write(7)
  utest('Ring(cap=2, len=1, items=[7])', repr, r)


utest_exc(AssertionError, Ring, cap=0)
