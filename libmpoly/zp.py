#!/usr/bin/env python3
#
#   Modular arithmetic in Zp: every element x satisfies 0 <= x < p.
#   The modulus is passed explicitly to each function, operands must already be reduced.
#

from libmpoly.errors import NotInvertible

def add(x : int, y : int, p : int) -> int:
    assert 0 <= x < p and 0 <= y < p
    z = x + y
    if z >= p:
        z -= p
    return z

def sub(x : int, y : int, p : int) -> int:
    assert 0 <= x < p and 0 <= y < p
    z = x - y
    if z < 0:
        z += p
    return z

def neg(x : int, p : int) -> int:
    assert 0 <= x < p
    if x == 0:
        return 0
    return p - x

def mul(x : int, y : int, p : int) -> int:
    """
    Computes x * y in Zp by Schrage's method, no intermediate result exceeds p.
    """
    assert 0 <= x < p and 0 <= y < p
    if x == 0:
        return 0
    # p = q x + r
    q, r = divmod(p, x)
    a = x * (y % q)
    if r <= q:
        b = r * (y // q)
    else:
        b = mul(r, y // q, p)
    return sub(a, b, p)

def inv(x : int, p : int) -> int:
    """
    Computes 1/x in Zp with the extended Euclidean algorithm (Knuth vol. 2, Algorithm X).

    Only the magnitude of the Bezout coefficient is tracked, its sign alternates with each iteration.
    """
    assert 0 <= x < p
    u1, u3 = 1, x
    v1, v3 = 0, p
    even_iter = True
    while v3 != 0:
        q, t3 = divmod(u3, v3)
        t1 = u1 + q * v1
        u1, v1 = v1, t1
        u3, v3 = v3, t3
        even_iter = not even_iter

    if u3 != 1:
        raise NotInvertible(x, p)

    return u1 if even_iter else p - u1

def pow(x : int, n : int, p : int) -> int:
    """
    Computes x^n in Zp. 0^0 is 1.
    """
    assert 0 <= x < p and n >= 0
    r = 1 % p
    while n > 0:
        if n & 1:
            r = mul(r, x, p)
        x = mul(x, x, p)
        n >>= 1
    return r

########################################################################################################################
#   Unit Tests
########################################################################################################################

import builtins
import random
import unittest

class TestZp(unittest.TestCase):

    def test_add(self):
        self.assertEqual(add(100, 200, 251), 300 % 251)
        self.assertEqual(add(100, 151, 251), 0)
        self.assertEqual(add(100, 100, 251), 200)

    def test_sub(self):
        self.assertEqual(sub(100, 200, 251), (251 + 100 - 200) % 251)
        self.assertEqual(sub(200, 100, 251), 100)

    def test_mul(self):
        for x,y in [(100, 200), (11, 23), (10, 20), (250, 250), (250, 2), (2, 250), (16, 16), (128, 2), (2, 128),
                    (0, 0), (0, 1), (0, 250), (1, 0), (250, 0)]:
            self.assertEqual(mul(x, y, 251), x * y % 251)

    def test_mul_large(self):
        rng = random.Random(1)
        p = 18446744073709551557
        for _ in range(1000):
            x = rng.randrange(p)
            y = rng.randrange(p)
            self.assertEqual(mul(x, y, p), x * y % p)

    def test_neg(self):
        for x in (0, 1, 2, 10, 16, 31, 100, 200, 249, 250):
            self.assertEqual(add(x, neg(x, 251), 251), 0)

    def test_inv(self):
        for p in (251, 65521, 2147483647, 18446744073709551557):
            for x in (1, 2, 10, 16, 31, 100, 200, 249, 250, p - 1):
                self.assertEqual(mul(x, inv(x, p), p), 1)

    def test_inv_all(self):
        for x in range(1, 251):
            self.assertEqual(mul(x, inv(x, 251), 251), 1)

    def test_not_invertible(self):
        with self.assertRaises(NotInvertible):
            inv(0, 251)
        with self.assertRaises(NotInvertible):
            inv(6, 15)
        # NotInvertible is still a ZeroDivisionError
        with self.assertRaises(ZeroDivisionError):
            inv(0, 7)

    def test_pow(self):
        for x,n,p in [(0, 0, 251), (1, 0, 251), (2, 0, 251), (0, 1, 251), (1, 1, 251), (2, 1, 251),
                      (0, 2, 251), (1, 2, 251), (2, 2, 251), (3, 3, 241), (3, 4, 241), (3, 5, 241),
                      (3, 6, 241), (10, 3, 251), (10, 6, 251), (101, 3, 251), (101, 6, 251)]:
            self.assertEqual(pow(x, n, p), x**n % p)

        p = 18446744073709551557
        self.assertEqual(pow(3, 12345, p), builtins.pow(3, 12345, p))
