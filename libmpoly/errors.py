#!/usr/bin/env python3
#
#   Exceptions raised by the arithmetic kernel
#

class DimensionMismatch(ValueError):
    """
    Variable counts or matrix/vector sizes disagree.
    """

class NotInvertible(ZeroDivisionError):
    """
    The element has no multiplicative inverse modulo p.
    """

    def __init__(self, x, p):
        super().__init__(f"{x} is not invertible in Z_{p}")
        self.x = x
        self.p = p

class Singular(ArithmeticError):
    """
    No pivot could be found while solving a linear system.
    """

    def __init__(self, col):
        super().__init__(f"Singular matrix, no pivot in column {col}")
        self.col = col

class ExponentOverflow(OverflowError):
    pass
