#!/usr/bin/env python3

import random

from libmpoly import zp
from libmpoly.errors import ExponentOverflow

########################################################################################################################
#   Integer helpers
########################################################################################################################

def gcd(a, b):
    while b != 0:
        a %= b
        a,b = b,a
    return abs(a)

def xgcd(a, b):
    prevx, x = 1, 0
    prevy, y = 0, 1
    while b != 0:
        q, r = divmod(a, b)
        x, prevx = prevx - q * x, x
        y, prevy = prevy - q * y, y
        a, b = b, r
    return a, prevx, prevy

# Various useful primes
LARGEST_u64_PRIME = 18446744073709551557
LARGEST_u32_PRIME = 4294967291
LARGEST_s32_PRIME = 2147483647
LARGEST_u16_PRIME = 65521
LARGEST_s16_PRIME = 32749

########################################################################################################################
#   Exponents
########################################################################################################################

class ExponentType:
    """
    Bounded unsigned integer used for the power of a single variable.
    """

    def __init__(self, bits : int):
        assert bits > 0
        self.bits = bits
        self.max = (1 << bits) - 1

    def __repr__(self):
        return f"ExponentType({self.bits})"

    def __eq__(self, other):
        return isinstance(other, ExponentType) and self.bits == other.bits

    def __hash__(self):
        return hash(self.bits)

    def zero(self):
        return 0

    def one(self):
        return 1

    def check(self, e : int):
        if not isinstance(e, int) or e < 0:
            raise ValueError(f"Exponents must be nonnegative integers, got {e!r}")
        if e > self.max:
            raise ExponentOverflow(f"Exponent {e} does not fit in {self.bits} bits")
        return e

    def checked_add(self, a : int, b : int):
        c = a + b
        if c > self.max:
            raise ExponentOverflow(f"Overflow in adding exponents {a} + {b} ({self.bits} bits)")
        return c

U8 = ExponentType(8)
U16 = ExponentType(16)
U32 = ExponentType(32)
U64 = ExponentType(64)

########################################################################################################################
#   Coefficient Rings
########################################################################################################################

class CoefficientRing:
    """
    Operations a coefficient type has to provide. Elements are plain values, the ring object does the arithmetic.

    Rings with exact division set `is_euclidean` and implement `div` and `rem`, fields additionally set `is_field`
    and implement `inv`.
    """

    is_euclidean = False
    is_field = False

    def __call__(self, arg):
        raise NotImplementedError()

    def zero(self):
        raise NotImplementedError()

    def one(self):
        raise NotImplementedError()

    def is_zero(self, x):
        return x == self.zero()

    def is_one(self, x):
        return x == self.one()

    def add(self, x, y):
        raise NotImplementedError()

    def sub(self, x, y):
        raise NotImplementedError()

    def neg(self, x):
        raise NotImplementedError()

    def mul(self, x, y):
        raise NotImplementedError()

    def pow(self, x, n : int):
        r = self.one()
        while n > 0:
            if n & 1:
                r = self.mul(r, x)
            x = self.mul(x, x)
            n >>= 1
        return r

    def div(self, x, y):
        raise NotImplementedError()

    def rem(self, x, y):
        raise NotImplementedError()

    def inv(self, x):
        raise NotImplementedError()

    def gcd(self, x, y):
        raise NotImplementedError()

    def is_unit(self, x):
        raise NotImplementedError()

    def divides(self, x, y):
        """
        Whether x divides y exactly
        """
        if self.is_one(x):
            return True
        return self.is_zero(self.rem(y, x))

    def rand_elem(self, min : int = 0):
        raise NotImplementedError()

    def rand_elems(self, num : int, min : int = 0, max : int = 0):
        raise NotImplementedError()

class IntegerRing(CoefficientRing):
    """
    The integers, with exact division by `div` only where `rem` vanishes.
    """

    is_euclidean = True

    def __call__(self, arg):
        if isinstance(arg, int):
            return arg
        raise ValueError(f"{arg!r} cannot be a member of the integers")

    def __repr__(self):
        return "ZZ"

    def __str__(self):
        return "The Integers"

    def __eq__(self, other):
        return isinstance(other, IntegerRing)

    def __hash__(self):
        return hash("ZZ")

    def zero(self):
        return 0

    def one(self):
        return 1

    def is_zero(self, x):
        return x == 0

    def is_one(self, x):
        return x == 1

    def add(self, x, y):
        return x + y

    def sub(self, x, y):
        return x - y

    def neg(self, x):
        return -x

    def mul(self, x, y):
        return x * y

    def pow(self, x, n : int):
        return x ** n

    def div(self, x, y):
        return x // y

    def rem(self, x, y):
        return x % y

    def gcd(self, x, y):
        return gcd(x, y)

    def is_unit(self, x):
        return x in (1, -1)

    def rand_elem(self, min : int = -100, max : int = 100):
        # Bounds are arbitrary for testing purposes
        return random.randint(min, max)

    def rand_elems(self, num : int, min : int = -100, max : int = 100):
        return [random.randint(min, max) for _ in range(num)]

ZZ = IntegerRing()

class GF(CoefficientRing):
    """
    Arithmetic in GF(p), elements are ints in range(p)
    """

    is_euclidean = True
    is_field = True

    def __init__(self, p : int):
        assert p > 1
        self.p = p

    def __repr__(self):
        return f"GF({self.p})"

    def __str__(self):
        return repr(self)

    def __eq__(self, other):
        if isinstance(other, GF):
            return self.p == other.p
        return False

    def __hash__(self):
        return hash(("GF", self.p))

    def __call__(self, arg):
        if isinstance(arg, int):
            return arg % self.p
        raise ValueError(f"{arg!r} cannot be a member of a prime field")

    def zero(self):
        return 0

    def one(self):
        return 1

    def is_zero(self, x):
        return x == 0

    def is_one(self, x):
        return x == 1

    def add(self, x, y):
        return zp.add(x, y, self.p)

    def sub(self, x, y):
        return zp.sub(x, y, self.p)

    def neg(self, x):
        return zp.neg(x, self.p)

    def mul(self, x, y):
        return zp.mul(x, y, self.p)

    def pow(self, x, n : int):
        return zp.pow(x, n, self.p)

    def inv(self, x):
        return zp.inv(x, self.p)

    def div(self, x, y):
        return zp.mul(x, zp.inv(y, self.p), self.p)

    def rem(self, x, y):
        if y == 0:
            raise ZeroDivisionError
        return 0

    def gcd(self, x, y):
        # Every non-zero element is a unit
        return 0 if x == 0 and y == 0 else 1

    def is_unit(self, x):
        return x != 0

    def rand_elem(self, min : int = 0):
        return random.randint(min, self.p - 1)

    def rand_elems(self, num : int, min : int = 0, max : int = 0):
        return random.sample(range(min, self.p + max), num)

    def rand_elem_distinct(self, min : int = 0, existing : list = []):
        # Obtains a random element not in `existing`
        r = self.rand_elem(min)
        while r in existing:
            r = self.rand_elem(min)
        return r

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestGCD(unittest.TestCase):

    def test_gcd(self):
        self.assertEqual(gcd(4, 3), 1)
        self.assertEqual(gcd(12, 3), 3)
        self.assertEqual(gcd(21, 9), 3)
        self.assertEqual(gcd(12, 4), 4)
        self.assertEqual(gcd(49, 7), 7)
        self.assertEqual(gcd(1, -2), gcd(1, 2))
        self.assertEqual(gcd(-1, -2), gcd(1, 2))
        self.assertEqual(gcd(0, 5), 5)

    def test_xgcd(self):
        self.assertEqual(xgcd(30, 18), (6, -1, 2))
        self.assertEqual(xgcd(18, 30), (6, 2, -1))
        self.assertEqual(xgcd(2, -1), (-1, 0, 1))

class TestExponentType(unittest.TestCase):

    def test_checked_add(self):
        self.assertEqual(U8.checked_add(100, 155), 255)
        with self.assertRaises(ExponentOverflow):
            U8.checked_add(200, 56)
        self.assertEqual(U64.checked_add(2**63, 2**63 - 1), 2**64 - 1)

    def test_check(self):
        self.assertEqual(U16.check(65535), 65535)
        with self.assertRaises(ExponentOverflow):
            U16.check(65536)
        with self.assertRaises(ValueError):
            U16.check(-1)

class TestIntegerRing(unittest.TestCase):

    def test_arith(self):
        self.assertEqual(ZZ.add(3, -5), -2)
        self.assertEqual(ZZ.mul(ZZ.neg(4), 3), -12)
        self.assertEqual(ZZ.pow(-2, 5), -32)
        self.assertTrue(ZZ.divides(3, -12))
        self.assertFalse(ZZ.divides(5, 12))
        self.assertEqual(ZZ.div(-12, 3), -4)
        self.assertEqual(ZZ.gcd(-12, 18), 6)
        self.assertTrue(ZZ.is_unit(-1))
        self.assertFalse(ZZ.is_unit(2))

class TestGF(unittest.TestCase):

    def test_arith(self):
        F = GF(251)
        self.assertEqual(F(-1), 250)
        self.assertEqual(F.add(200, 100), 49)
        self.assertEqual(F.sub(0, 1), 250)
        self.assertEqual(F.neg(0), 0)
        self.assertEqual(F.mul(F.inv(17), 17), 1)
        self.assertEqual(F.div(34, 17), 2)
        self.assertTrue(F.divides(17, 5))
        self.assertEqual(F.pow(3, 5), 243)
        self.assertEqual(F.gcd(0, 7), 1)
        self.assertEqual(F.gcd(0, 0), 0)

    def test_equality(self):
        self.assertEqual(GF(7), GF(7))
        self.assertNotEqual(GF(7), GF(11))
        self.assertNotEqual(GF(7), ZZ)

    def test_rand(self):
        F = GF(LARGEST_u16_PRIME)
        for x in F.rand_elems(10, 1):
            self.assertIn(x, range(1, F.p))
