#!/usr/bin/env python3
#
#   Sparse multivariate polynomials over a coefficient ring
#

import heapq
import logging
from collections import namedtuple
from functools import reduce
from typing import Dict, List, Optional, Sequence, Tuple

from libmpoly.basic_types import GF, U32, CoefficientRing, ExponentType
from libmpoly.errors import DimensionMismatch

logger = logging.getLogger(__name__)

# Read-only view of a single term
Term = namedtuple("Term", ["coefficient", "exponents"])

def is_increasing(vars):
    return all(a < b for a,b in zip(vars, vars[1:]))

def make_power_cache(nvars : int, size : int):
    """
    Empty power cache for `Polynomial.replace_all_except`, slot [n][k] receives value_n^k once it is needed
    """
    return [[None] * size for _ in range(nvars)]

########################################################################################################################
#   Polynomial Rings
########################################################################################################################

class PolynomialRing:
    def __init__(self, coeff_ring : CoefficientRing, var_names, exponent : ExponentType = U32):
        if isinstance(var_names, int):
            var_names = [f"x{i}" for i in range(var_names)]
        self.coeff_ring = coeff_ring
        self.var_names = list(var_names)
        self.n_vars = len(self.var_names)
        assert len(set(self.var_names)) == self.n_vars , "Variable names must be distinct"
        self.exponent = exponent
        self.variables_cached = None

    def to_coeff_ring(self, coeff_ring : CoefficientRing):
        return PolynomialRing(coeff_ring, self.var_names, self.exponent)

    def zero(self):
        return Polynomial.zero(self)

    def one(self):
        return self.constant(self.coeff_ring.one())

    def constant(self, value):
        p = Polynomial.zero(self)
        p.append_monomial(value, [0] * self.n_vars)
        return p

    def monomial(self, coefficient, exponents):
        exponents = [self.exponent.check(e) for e in exponents]
        if len(exponents) != self.n_vars:
            raise DimensionMismatch(f"nvars mismatched: got {len(exponents)}, expected {self.n_vars}")
        p = Polynomial.zero(self)
        p.append_monomial(coefficient, exponents)
        return p

    def variables(self):
        # If already computed
        if self.variables_cached is not None:
            return self.variables_cached

        variables = []
        for i in range(self.n_vars):
            degrees = [0] * self.n_vars
            degrees[i] = 1
            variables.append(self.monomial(self.coeff_ring.one(), degrees))
        self.variables_cached = tuple(variables)
        return self.variables_cached

    def __call__(self, element):
        if isinstance(element, Polynomial):
            if element.ring == self:
                return element.copy()
            if element.nvars != self.n_vars and not element.is_zero():
                raise DimensionMismatch(f"nvars mismatched: got {element.nvars}, expected {self.n_vars}")
            return Polynomial(self, element)
        elif isinstance(element, Monomial):
            return self.monomial(self.coeff_ring(element.coefficient), element.exponents)
        else:
            return self.constant(self.coeff_ring(element))

    def __eq__(self, other):
        if not isinstance(other, PolynomialRing):
            return False
        return self.coeff_ring == other.coeff_ring and self.var_names == other.var_names and \
               self.exponent == other.exponent

    def __hash__(self):
        return hash((self.coeff_ring, tuple(self.var_names)))

    def __str__(self):
        return f"Polynomial Ring in {self.n_vars} variable(s) {self.var_names} over {self.coeff_ring}"

    def __repr__(self) -> str:
        return f"PolynomialRing({self.coeff_ring!r}, {self.var_names!r})"

########################################################################################################################
#   Monomial
########################################################################################################################

class Monomial:
    """
    A coefficient together with an exponent vector.
    """

    def __init__(self, ring : PolynomialRing, coefficient, exponents):
        exponents = tuple(exponents)
        if len(exponents) != ring.n_vars:
            raise DimensionMismatch(f"Degrees should match number of variables, got {exponents}")
        self.ring = ring
        self.coefficient = coefficient
        self.exponents = exponents

    def __hash__(self):
        return hash((self.coefficient, self.exponents))

    def __repr__(self):
        return f"Monomial({self.ring!r}, {self.coefficient!r}, {self.exponents!r})"

    def __str__(self):
        mon = "*".join(name if d == 1 else f"{name}^{d}"
                       for name,d in zip(self.ring.var_names, self.exponents) if d != 0)
        if not mon:
            return f"{self.coefficient}"
        if self.ring.coeff_ring.is_one(self.coefficient):
            return mon
        return f"{self.coefficient}*{mon}"

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.exponents == other.exponents and self.coefficient == other.coefficient

    # Monomials are ordered by their exponents only
    def __lt__(self, other):
        return self.exponents < other.exponents

    def __gt__(self, other):
        return self.exponents > other.exponents

    def __neg__(self):
        return Monomial(self.ring, self.ring.coeff_ring.neg(self.coefficient), self.exponents)

    def __mul__(self, other):
        cr = self.ring.coeff_ring
        if not isinstance(other, Monomial):
            return Monomial(self.ring, cr.mul(self.coefficient, other), self.exponents)
        if len(other.exponents) != len(self.exponents):
            raise DimensionMismatch("Monomials have different numbers of variables")
        add = self.ring.exponent.checked_add
        return Monomial(self.ring, cr.mul(self.coefficient, other.coefficient),
                        (add(a, b) for a,b in zip(self.exponents, other.exponents)))

    def divisible_by(self, other):
        """
        Whether other divides self exactly, in the exponents as well as the coefficient
        """
        if not all(a >= b for a,b in zip(self.exponents, other.exponents)):
            return False
        return self.ring.coeff_ring.divides(other.coefficient, self.coefficient)

    def __truediv__(self, other):
        if not self.divisible_by(other):
            raise ArithmeticError(f"{other} does not divide {self}")
        return Monomial(self.ring, self.ring.coeff_ring.div(self.coefficient, other.coefficient),
                        (a - b for a,b in zip(self.exponents, other.exponents)))

########################################################################################################################
#   Polynomial
########################################################################################################################

class Polynomial:
    """
    Multivariate polynomial, sparse in the terms and dense in the variables.

    Term i is stored as coefficients[i] and exponents[i * nvars:(i + 1) * nvars]. The terms are kept sorted
    by lexicographic order on the exponents (variable 0 most significant), without duplicates and without zero
    coefficients, so the last term is the leading term.
    """

    def __init__(self, ring : PolynomialRing, terms=()):
        self.ring = ring
        self.coefficients = []
        self.exponents = []
        for coeff,exps in terms:
            self.append_monomial(ring.coeff_ring(coeff), exps)

    @staticmethod
    def zero(ring):
        return Polynomial(ring)

    @classmethod
    def _from_sorted(cls, ring, coefficients, exponents):
        # Buffers must already satisfy the ordering and zero-free invariants
        p = cls(ring)
        p.coefficients = coefficients
        p.exponents = exponents
        return p

    def copy(self):
        return Polynomial._from_sorted(self.ring, list(self.coefficients), list(self.exponents))

    @property
    def nvars(self):
        return self.ring.n_vars

    @property
    def nterms(self):
        return len(self.coefficients)

    def __len__(self):
        return len(self.coefficients)

    def exponents_of(self, i : int):
        n = self.nvars
        return self.exponents[i * n:(i + 1) * n]

    def last_exponents(self):
        assert self.nterms > 0
        return self.exponents_of(self.nterms - 1)

    def to_monomial(self, i : int):
        return Monomial(self.ring, self.coefficients[i], self.exponents_of(i))

    def __iter__(self):
        for i,c in enumerate(self.coefficients):
            yield Term(c, tuple(self.exponents_of(i)))

    def __reversed__(self):
        for i in reversed(range(self.nterms)):
            yield Term(self.coefficients[i], tuple(self.exponents_of(i)))

    def clear(self):
        self.coefficients.clear()
        self.exponents.clear()

    def check_consistency(self):
        """
        Checks that the polynomial is sorted and has only non-zero coefficients
        """
        if len(self.exponents) != self.nterms * self.nvars:
            raise AssertionError(f"Inconsistent polynomial ({len(self.exponents)} exponents for "
                                 f"{self.nterms} terms in {self.nvars} variables)")
        for c in self.coefficients:
            if self.ring.coeff_ring.is_zero(c):
                raise AssertionError(f"Inconsistent polynomial (0 coefficient): {self}")
        for t in range(1, self.nterms):
            prev, cur = self.exponents_of(t - 1), self.exponents_of(t)
            if prev == cur:
                raise AssertionError(f"Inconsistent polynomial (equal monomials): {self}")
            if prev > cur:
                raise AssertionError(f"Inconsistent polynomial (wrong monomial ordering): {self}")

    def _check_ring(self, other):
        if self.nvars != other.nvars:
            raise DimensionMismatch(f"nvars mismatched: {self.nvars} != {other.nvars}")
        if self.ring.coeff_ring != other.ring.coeff_ring:
            raise ValueError(f"Coefficient rings differ: {self.ring.coeff_ring} != {other.ring.coeff_ring}")

    def _check_var(self, x):
        if not 0 <= x < self.nvars:
            raise IndexError(f"Variable index {x} out of range for {self.nvars} variables")

    ####################################################################################################################
    #   Term insertion
    ####################################################################################################################

    def append_monomial_back(self, coefficient, exponents):
        """
        Appends a term that is not below the current leading term, merging with it when the exponents are equal.
        """
        cr = self.ring.coeff_ring
        if cr.is_zero(coefficient):
            return

        exponents = [self.ring.exponent.check(e) for e in exponents]
        if self.nterms > 0 and exponents == self.last_exponents():
            new_coeff = cr.add(self.coefficients[-1], coefficient)
            if cr.is_zero(new_coeff):
                self.coefficients.pop()
                del self.exponents[-self.nvars:]
            else:
                self.coefficients[-1] = new_coeff
        else:
            assert self.nterms == 0 or exponents > self.last_exponents()
            self.coefficients.append(coefficient)
            self.exponents.extend(exponents)

    def append_monomial(self, coefficient, exponents):
        """
        Adds a single term to the polynomial, keeping the terms sorted and merged.
        """
        cr = self.ring.coeff_ring
        if cr.is_zero(coefficient):
            return

        exponents = [self.ring.exponent.check(e) for e in exponents]
        n = self.nvars
        if len(exponents) != n:
            raise DimensionMismatch(f"nvars mismatched: got {len(exponents)}, expected {n}")

        # should we append to the back?
        if self.nterms == 0 or self.last_exponents() < exponents:
            self.coefficients.append(coefficient)
            self.exponents.extend(exponents)
            return

        # binary search for the insertion point
        lo, hi = 0, self.nterms
        while lo < hi:
            mid = (lo + hi) // 2
            e = self.exponents[mid * n:(mid + 1) * n]
            if e < exponents:
                lo = mid + 1
            elif e > exponents:
                hi = mid
            else:
                new_coeff = cr.add(self.coefficients[mid], coefficient)
                if cr.is_zero(new_coeff):
                    # the term cancels, remove it
                    del self.coefficients[mid]
                    del self.exponents[mid * n:(mid + 1) * n]
                else:
                    self.coefficients[mid] = new_coeff
                return

        self.coefficients.insert(lo, coefficient)
        self.exponents[lo * n:lo * n] = exponents

    ####################################################################################################################
    #   Inspection
    ####################################################################################################################

    def is_zero(self):
        return self.nterms == 0

    def is_one(self):
        return self.nterms == 1 and self.ring.coeff_ring.is_one(self.coefficients[0]) and \
               all(e == 0 for e in self.exponents)

    def is_constant(self):
        if self.is_zero():
            return True
        if self.nterms >= 2:
            return False
        return all(e == 0 for e in self.exponents)

    def degree(self, x : int):
        """
        Degree in the variable x, O(n)
        """
        self._check_var(x)
        n = self.nvars
        return max(self.exponents[x::n], default=0)

    def ldegree(self, x : int):
        """
        Degree of x in the leading term
        """
        self._check_var(x)
        if self.is_zero():
            return 0
        return self.last_exponents()[x]

    def ldegree_max(self):
        """
        Highest power of any variable in the leading term
        """
        if self.is_zero():
            return 0
        return max(self.last_exponents(), default=0)

    def variables_used(self):
        n = self.nvars
        return {x for x in range(n) if any(self.exponents[x::n])}

    def lcoeff(self):
        if self.is_zero():
            return self.ring.coeff_ring.zero()
        return self.coefficients[-1]

    def lcoeff_varorder(self, vars : Sequence[int]):
        """
        Leading coefficient when the variables are prioritised in the order given by `vars`.
        This is O(n) unless `vars` is increasing.
        """
        if is_increasing(vars):
            return self.lcoeff()

        highest = [0] * self.nvars
        highestc = self.ring.coeff_ring.zero()

        for c,e in self:
            more = False
            for v in vars:
                if more:
                    highest[v] = e[v]
                elif e[v] < highest[v]:
                    # dominated by an earlier term
                    break
                elif e[v] > highest[v]:
                    highest[v] = e[v]
                    more = True
            else:
                highestc = c
        return highestc

    def lcoeff_last(self, n : int):
        """
        Leading coefficient, viewed as a polynomial in the variable `n` with all other variables taking priority.
        """
        self._check_var(n)
        if self.is_zero():
            return Polynomial.zero(self.ring)
        if n != self.nvars - 1:
            return self.lcoeff_last_varorder([i for i in range(self.nvars) if i != n] + [n])

        # the last variable has the lowest priority, so the leading coefficient is the run of trailing terms
        # that agree with the leading term in every other variable
        last = self.last_exponents()
        res = Polynomial.zero(self.ring)
        e = [0] * self.nvars
        for t in reversed(range(self.nterms)):
            et = self.exponents_of(t)
            if et[:n] != last[:n]:
                break
            e[n] = et[n]
            res.append_monomial(self.coefficients[t], e)
        return res

    def lcoeff_last_varorder(self, vars : Sequence[int]):
        """
        Leading coefficient under the variable order `vars`, viewed as a polynomial in the last variable of `vars`.
        This is O(n) unless `vars` is increasing.
        """
        if self.is_zero():
            return Polynomial.zero(self.ring)
        if is_increasing(vars):
            return self.lcoeff_last(vars[-1])

        *prio, lastvar = vars
        highest = [0] * self.nvars
        indices = []

        for i in range(self.nterms):
            e = self.exponents_of(i)
            more = False
            for v in prio:
                if more:
                    highest[v] = e[v]
                elif e[v] < highest[v]:
                    break
                elif e[v] > highest[v]:
                    highest[v] = e[v]
                    indices.clear()
                    more = True
            else:
                indices.append(i)

        res = Polynomial.zero(self.ring)
        e = [0] * self.nvars
        for i in indices:
            e[lastvar] = self.exponents_of(i)[lastvar]
            res.append_monomial(self.coefficients[i], e)
        return res

    def content(self):
        """
        GCD of the coefficients
        """
        cr = self.ring.coeff_ring
        if self.is_zero():
            return cr.zero()
        return reduce(cr.gcd, self.coefficients[1:], self.coefficients[0])

    def __call__(self, *x):
        """
        Evaluates the polynomial at the point x
        """
        if len(x) == 1 and isinstance(x[0], (tuple, list)):
            x = x[0]
        if len(x) != self.nvars:
            raise DimensionMismatch(f"Expected {self.nvars} values, got {len(x)}")
        cr = self.ring.coeff_ring
        x = [cr(xi) for xi in x]
        total = cr.zero()
        for c,e in self:
            for xi,d in zip(x, e):
                if d != 0:
                    c = cr.mul(c, cr.pow(xi, d))
            total = cr.add(total, c)
        return total

    def to_finite_field(self, p : int):
        """
        Maps the coefficients into GF(p), terms vanishing modulo p are dropped
        """
        field = GF(p)
        return Polynomial(self.ring.to_coeff_ring(field), ((field(c), e) for c,e in self))

    ####################################################################################################################
    #   Arithmetic
    ####################################################################################################################

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, Monomial):
            return Polynomial(other.ring, [(other.coefficient, other.exponents)])
        return None

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return self.add_scalar(self.ring.coeff_ring(other))

        if self.is_zero():
            return rhs.copy()
        if rhs.is_zero():
            return self.copy()
        self._check_ring(rhs)

        # merge the two sorted term lists
        cr = self.ring.coeff_ring
        n = self.nvars
        coeffs = []
        exps = []
        i = j = 0
        L1, L2 = self.nterms, rhs.nterms
        while i < L1 and j < L2:
            e1 = self.exponents_of(i)
            e2 = rhs.exponents_of(j)
            if e1 < e2:
                coeffs.append(self.coefficients[i])
                exps.extend(e1)
                i += 1
            elif e1 > e2:
                coeffs.append(rhs.coefficients[j])
                exps.extend(e2)
                j += 1
            else:
                c = cr.add(self.coefficients[i], rhs.coefficients[j])
                if not cr.is_zero(c):
                    coeffs.append(c)
                    exps.extend(e1)
                i += 1
                j += 1

        coeffs.extend(self.coefficients[i:])
        exps.extend(self.exponents[i * n:])
        coeffs.extend(rhs.coefficients[j:])
        exps.extend(rhs.exponents[j * n:])
        return Polynomial._from_sorted(self.ring, coeffs, exps)

    def __radd__(self, other):
        return self.__add__(other)

    def add_scalar(self, value):
        p = self.copy()
        p.append_monomial(value, [0] * self.nvars)
        return p

    def __neg__(self):
        """
        Returns the additive inverse of this polynomial
        """
        cr = self.ring.coeff_ring
        return Polynomial._from_sorted(self.ring, [cr.neg(c) for c in self.coefficients], list(self.exponents))

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            cr = self.ring.coeff_ring
            return self.add_scalar(cr.neg(cr(other)))
        return self + (-rhs)

    def __rsub__(self, other):
        return (-self) + other

    def mul_monomial(self, coefficient, exponents):
        """
        Multiplies every term by coefficient * x^exponents, exponents are added with overflow checking
        """
        cr = self.ring.coeff_ring
        add = self.ring.exponent.checked_add
        n = self.nvars
        assert len(exponents) == n
        coeffs = []
        exps = []
        for i,c in enumerate(self.coefficients):
            c = cr.mul(c, coefficient)
            # the ring may have zero divisors
            if cr.is_zero(c):
                continue
            coeffs.append(c)
            exps.extend(add(a, b) for a,b in zip(self.exponents[i * n:(i + 1) * n], exponents))
        return Polynomial._from_sorted(self.ring, coeffs, exps)

    def mul_scalar(self, value):
        cr = self.ring.coeff_ring
        n = self.nvars
        coeffs = []
        exps = []
        for i,c in enumerate(self.coefficients):
            c = cr.mul(c, value)
            if cr.is_zero(c):
                continue
            coeffs.append(c)
            exps.extend(self.exponents[i * n:(i + 1) * n])
        return Polynomial._from_sorted(self.ring, coeffs, exps)

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return self.mul_scalar(self.ring.coeff_ring(other))

        if self.is_zero() or rhs.is_zero():
            return Polynomial.zero(self.ring)
        self._check_ring(rhs)

        # one shifted copy of self per term of rhs, merged by addition
        res = Polynomial.zero(self.ring)
        for c,e in rhs:
            res = res + self.mul_monomial(c, e)
        return res

    def __rmul__(self, other):
        # Polynomial rings are commutative
        return self * other

    def __pow__(self, power : int):
        assert isinstance(power, int) and power >= 0
        p = self.ring.one()
        for _ in range(power):
            p = p * self
        return p

    def __eq__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            if not isinstance(other, int):
                return NotImplemented
            rhs = self.ring(other)

        if self.nvars != rhs.nvars:
            if self.is_zero() and rhs.is_zero():
                return True
            if self.is_zero() or rhs.is_zero():
                return False
            raise DimensionMismatch(f"nvars mismatched: {self.nvars} != {rhs.nvars}")
        return self.exponents == rhs.exponents and self.coefficients == rhs.coefficients

    def __hash__(self):
        return hash((tuple(self.coefficients), tuple(self.exponents)))

    ####################################################################################################################
    #   Structural transforms
    ####################################################################################################################

    def rearrange(self, varmap : Sequence[int], inverse : bool = False):
        """
        Changes the order of the variables according to `varmap`, new variable x takes the exponents of old
        variable varmap[x]. With `inverse` the map is applied the other way round.
        """
        if len(varmap) != self.nvars:
            raise DimensionMismatch(f"Variable map has {len(varmap)} entries for {self.nvars} variables")

        res = Polynomial.zero(self.ring)
        newe = [0] * self.nvars
        for c,e in self:
            for x,y in enumerate(varmap):
                if not inverse:
                    newe[x] = e[y]
                else:
                    newe[y] = e[x]
            res.append_monomial(c, newe)
        return res

    def replace(self, n : int, v):
        """
        Replaces the variable n by the ring element v
        """
        self._check_var(n)
        cr = self.ring.coeff_ring
        res = Polynomial.zero(self.ring)
        for c,e in self:
            e = list(e)
            c = cr.mul(c, cr.pow(v, e[n]))
            e[n] = 0
            res.append_monomial(c, e)
        return res

    def replace_all_except(self, v : int, r : Sequence[Tuple[int, object]], cache : Optional[List[list]] = None):
        """
        Replaces the variables in `r`, given as (variable, value) pairs, keeping only `v` symbolic.

        `cache[n][k]` holds the k-th power of the value for variable n and is filled on first use, an entry of
        None or zero is treated as empty. Powers beyond the end of the cache are computed directly.
        """
        self._check_var(v)
        for n,_ in r:
            self._check_var(n)
        cr = self.ring.coeff_ring
        tm = {}

        for c,e in self:
            for n,value in r:
                p = e[n]
                if p == 0:
                    continue
                if cache is not None and p < len(cache[n]):
                    power = cache[n][p]
                    if power is None or cr.is_zero(power):
                        power = cr.pow(value, p)
                        cache[n][p] = power
                else:
                    power = cr.pow(value, p)
                c = cr.mul(c, power)

            k = e[v]
            if k in tm:
                tm[k] = cr.add(tm[k], c)
            else:
                tm[k] = c

        res = Polynomial.zero(self.ring)
        e = [0] * self.nvars
        for k in sorted(tm):
            e[v] = k
            res.append_monomial(tm[k], e)
        return res

    def to_univariate_polynomial(self, x : int) -> List[Tuple["Polynomial", int]]:
        """
        Splits into coefficients of powers of x, returned as (coefficient, power) pairs by ascending power
        """
        self._check_var(x)
        groups = {}
        for c,e in self:
            e = list(e)
            d = e[x]
            e[x] = 0
            if d not in groups:
                groups[d] = Polynomial.zero(self.ring)
            groups[d].append_monomial(c, e)
        return [(groups[d], d) for d in sorted(groups)]

    def to_multivariate_polynomial(self, xs : Sequence[int], include : bool = True) -> Dict[tuple, "Polynomial"]:
        """
        Splits into a polynomial in the variables xs if include is true, otherwise in the variables not in xs.
        The keys are the full exponent vectors of the split off part.
        """
        for x in xs:
            self._check_var(x)
        tm = {}
        for c,e in self:
            e = list(e)
            me = [0] * self.nvars
            for x in xs:
                me[x] = e[x]
                e[x] = 0

            key, rest = (me, e) if include else (e, me)
            key = tuple(key)
            if key not in tm:
                tm[key] = Polynomial.zero(self.ring)
            tm[key].append_monomial(c, rest)
        return tm

    ####################################################################################################################
    #   Division
    ####################################################################################################################

    def _check_division(self, div, q, r):
        assert q * div + r == self , f"Division failed: ({self})/({div}): q={q}, r={r}"

    def divide_monomial(self, div):
        """
        Division by a single term: divisible terms go to the quotient, the others to the remainder
        """
        assert div.nterms == 1
        dive = div.to_monomial(0)
        q = Polynomial.zero(self.ring)
        r = Polynomial.zero(self.ring)

        # both selections preserve the term order
        for i in range(self.nterms):
            m = self.to_monomial(i)
            if m.divisible_by(dive):
                t = m / dive
                q.coefficients.append(t.coefficient)
                q.exponents.extend(t.exponents)
            else:
                r.coefficients.append(m.coefficient)
                r.exponents.extend(m.exponents)
        return q, r

    def _univariate_var(self, div):
        used = self.variables_used() | div.variables_used()
        if len(used) != 1:
            return None
        return used.pop()

    def synthetic_division(self, div):
        """
        Synthetic division for polynomials univariate in the same variable.

        Each power of the variable, from the degree of self down to 0, is reduced by the products of the quotient
        terms found so far with the divisor. Where the leading coefficient of the divisor does not divide the result
        the term is sent to the remainder.
        """
        var = self._univariate_var(div)
        if var is None:
            raise ValueError("Synthetic division needs polynomials univariate in the same variable")

        cr = self.ring.coeff_ring
        norm = div.lcoeff()
        m = div.ldegree(var)

        f = {e[var] : c for c,e in self}
        g = {e[var] : c for c,e in div}
        q = {}
        r = {}

        for deg in range(self.ldegree(var), -1, -1):
            coeff = f.get(deg, cr.zero())
            for k,qc in q.items():
                d = deg - k
                if d in g:
                    coeff = cr.sub(coeff, cr.mul(g[d], qc))

            if cr.is_zero(coeff):
                continue

            # can the division be performed? if not, add to the remainder
            if deg >= m and cr.divides(norm, coeff):
                q[deg - m] = cr.div(coeff, norm)
            else:
                r[deg] = coeff

        def build(terms):
            p = Polynomial.zero(self.ring)
            e = [0] * self.nvars
            for d in sorted(terms):
                e[var] = d
                p.append_monomial_back(terms[d], e)
            return p

        Q, R = build(q), build(r)
        self._check_division(div, Q, R)
        return Q, R

    def long_division(self, div):
        """
        Long division for multivariate polynomials.

        When the leading coefficient of the divisor does not divide the current leading coefficient, the division
        stops and the current quotient and remainder are returned.
        """
        if div.is_zero():
            raise ZeroDivisionError("Cannot divide by 0 polynomial")

        cr = self.ring.coeff_ring
        q = Polynomial.zero(self.ring)
        r = self.copy()
        lc = div.lcoeff()
        lm = div.last_exponents()

        while not r.is_zero() and all(a >= b for a,b in zip(r.last_exponents(), lm)):
            if not cr.divides(lc, r.lcoeff()):
                # inexact in this ring, the current leading term stays in the remainder
                break

            tc = cr.div(r.lcoeff(), lc)
            tp = [a - b for a,b in zip(r.last_exponents(), lm)]
            q.append_monomial(tc, tp)
            r = r - div.mul_monomial(tc, tp)

        self._check_division(div, q, r)
        return q, r

    def heap_division(self, div):
        """
        Heap division for multivariate polynomials.

        Reference: "Polynomial Division Using Dynamic Arrays, Heaps, and Packed Exponent Vectors" by
        Monagan, Pearce (2007)

        The heap holds the dividend terms and the products of quotient terms with the non-leading divisor terms,
        tagged by where they came from. Entries with equal exponents are merged before the result is tested against
        the leading term of the divisor, so cancellations never expand the full product.
        """
        cr = self.ring.coeff_ring
        add = self.ring.exponent.checked_add
        lc = div.lcoeff()
        lm = div.last_exponents()

        # leading terms first
        fc = self.coefficients[::-1]
        fe = [self.exponents_of(i) for i in reversed(range(self.nterms))]
        gc = div.coefficients[::-1]
        ge = [div.exponents_of(i) for i in reversed(range(div.nterms))]

        qc, qe = [], []
        rc, re = [], []

        # heapq is a min-heap, negating the exponents pops the largest term first.
        # (key, i, -1) is dividend term i, (key, i, j) is divisor term i times quotient term j
        heap = []
        if fc:
            heap.append((tuple(-a for a in fe[0]), 0, -1))

        while heap:
            key = heap[0][0]
            exps = [-a for a in key]
            coeff = cr.zero()

            while heap and heap[0][0] == key:
                _, i, j = heapq.heappop(heap)
                if j < 0:
                    coeff = cr.add(coeff, fc[i])
                    if i + 1 < len(fc):
                        heapq.heappush(heap, (tuple(-a for a in fe[i + 1]), i + 1, -1))
                else:
                    coeff = cr.sub(coeff, cr.mul(qc[j], gc[i]))

            if cr.is_zero(coeff):
                continue

            if all(a >= b for a,b in zip(exps, lm)) and cr.divides(lc, coeff):
                qc.append(cr.div(coeff, lc))
                qe.append([a - b for a,b in zip(exps, lm)])
                j = len(qc) - 1
                for i in range(1, len(gc)):
                    heapq.heappush(heap, (tuple(-add(a, b) for a,b in zip(qe[j], ge[i])), i, j))
            else:
                rc.append(coeff)
                re.append(exps)

        # quotient and remainder were produced with the highest terms first
        q = Polynomial._from_sorted(self.ring, qc[::-1], [a for e in reversed(qe) for a in e])
        r = Polynomial._from_sorted(self.ring, rc[::-1], [a for e in reversed(re) for a in e])

        self._check_division(div, q, r)
        return q, r

    def divmod(self, div):
        """
        Divides by `div`, returning (quotient, remainder) with quotient * div + remainder == self.
        """
        rhs = self._coerce(div)
        div = rhs if rhs is not None else self.ring(div)

        if div.is_zero():
            raise ZeroDivisionError("Cannot divide by 0 polynomial")
        if self.is_zero():
            return Polynomial.zero(self.ring), Polynomial.zero(self.ring)
        self._check_ring(div)
        if div.is_one():
            return self.copy(), Polynomial.zero(self.ring)

        cr = self.ring.coeff_ring
        if div.nterms == 1:
            strategy = self.divide_monomial
        elif not cr.is_field and not cr.is_unit(div.lcoeff()):
            strategy = self.long_division
        elif self._univariate_var(div) is not None:
            strategy = self.synthetic_division
        else:
            strategy = self.heap_division

        logger.debug("Dividing %d terms by %d terms with %s", self.nterms, div.nterms, strategy.__name__)
        return strategy(div)

    def __divmod__(self, other):
        return self.divmod(other)

    def __floordiv__(self, other):
        return self.divmod(other)[0]

    def __mod__(self, other):
        return self.divmod(other)[1]

    ####################################################################################################################
    #   Printing
    ####################################################################################################################

    def __str__(self):
        if self.is_zero():
            return "0"

        cr = self.ring.coeff_ring
        terms = []
        for c,e in reversed(self):
            mon = "*".join(name if d == 1 else f"{name}^{d}" for name,d in zip(self.ring.var_names, e) if d != 0)
            if not mon:
                terms.append(f"{c}")
            elif cr.is_one(c):
                terms.append(mon)
            elif cr.is_one(cr.neg(c)):
                terms.append(f"-{mon}")
            else:
                terms.append(f"{c}*{mon}")
        return " + ".join(terms)

    def __repr__(self):
        return f"Polynomial({self.ring!r}, {[(c, e) for c,e in self]!r})"

########################################################################################################################
#   Unit Tests
########################################################################################################################

import random
import unittest

from libmpoly.basic_types import U8, ZZ
from libmpoly.errors import ExponentOverflow

def rand_poly(ring, rng, nterms, maxdeg=3):
    cr = ring.coeff_ring
    if isinstance(cr, GF):
        coeff = lambda: rng.randrange(cr.p)
    else:
        coeff = lambda: rng.randint(-20, 20)
    return Polynomial(ring, [(coeff(), [rng.randint(0, maxdeg) for _ in range(ring.n_vars)])
                             for _ in range(nterms)])

class TestInsertion(unittest.TestCase):

    def setUp(self):
        self.R = PolynomialRing(ZZ, 2)

    def test_sorted_append(self):
        p = Polynomial.zero(self.R)
        for i in range(5):
            p.append_monomial(i + 1, [i, 0])
        p.check_consistency()
        self.assertEqual(p.coefficients, [1, 2, 3, 4, 5])
        self.assertEqual(p.exponents, [0, 0, 1, 0, 2, 0, 3, 0, 4, 0])

    def test_unsorted_insert(self):
        p = Polynomial.zero(self.R)
        for e in ([2, 1], [0, 3], [1, 1], [0, 0], [2, 0]):
            p.append_monomial(7, e)
        p.check_consistency()
        self.assertEqual(p.exponents, [0, 0, 0, 3, 1, 1, 2, 0, 2, 1])

    def test_merge_and_cancel(self):
        p = Polynomial(self.R, [(1, [1, 0]), (2, [0, 1]), (3, [0, 0])])
        p.append_monomial(4, [0, 1])
        self.assertEqual(p.coefficients, [3, 6, 1])
        p.append_monomial(-6, [0, 1])
        p.check_consistency()
        self.assertEqual(p.coefficients, [3, 1])
        self.assertEqual(p.exponents, [0, 0, 1, 0])
        p.append_monomial(-1, [1, 0])
        p.append_monomial(-3, [0, 0])
        self.assertTrue(p.is_zero())
        self.assertEqual(p.exponents, [])

    def test_zero_coefficient(self):
        p = Polynomial.zero(self.R)
        p.append_monomial(0, [1, 1])
        self.assertTrue(p.is_zero())

    def test_dimension_mismatch(self):
        p = Polynomial.zero(self.R)
        with self.assertRaises(DimensionMismatch):
            p.append_monomial(1, [1, 2, 3])

    def test_exponent_bounds(self):
        R = PolynomialRing(ZZ, 2, exponent=U8)
        p = Polynomial(R, [(1, [1, 1])])
        # fast append path and binary search path
        for e in ([-1, 300], [0, -1], [2, 0.5]):
            with self.assertRaises(ValueError):
                p.append_monomial(1, e)
        for e in ([300, 0], [0, 256]):
            with self.assertRaises(ExponentOverflow):
                p.append_monomial(1, e)
        with self.assertRaises(ValueError):
            p.append_monomial_back(1, [3, -1])
        with self.assertRaises(ExponentOverflow):
            p.append_monomial_back(1, [256, 0])
        p.check_consistency()
        self.assertEqual(p.exponents, [1, 1])
        p.append_monomial(1, [255, 255])
        self.assertEqual(p.exponents, [1, 1, 255, 255])

    def test_append_back(self):
        p = Polynomial.zero(self.R)
        p.append_monomial_back(1, [0, 1])
        p.append_monomial_back(2, [1, 0])
        p.append_monomial_back(-2, [1, 0])
        p.check_consistency()
        self.assertEqual(list(p), [Term(1, (0, 1))])

    def test_random_insertion(self):
        rng = random.Random(3)
        R = PolynomialRing(GF(7), 3)
        for _ in range(50):
            p = rand_poly(R, rng, 20)
            p.check_consistency()

    def test_iteration(self):
        p = Polynomial(self.R, [(5, [2, 0]), (3, [0, 1])])
        self.assertEqual(list(p), [Term(3, (0, 1)), Term(5, (2, 0))])
        self.assertEqual(next(reversed(p)), Term(5, (2, 0)))
        self.assertEqual(len(p), 2)

class TestArithmetic(unittest.TestCase):

    def test_difference_of_squares(self):
        R = PolynomialRing(ZZ, 1)
        x0, = R.variables()
        p = (x0 + 1) * (x0 - 1)
        p.check_consistency()
        self.assertEqual(p.nterms, 2)
        self.assertEqual(p.coefficients, [-1, 1])
        self.assertEqual(p.exponents, [0, 2])

    def test_ring_laws(self):
        rng = random.Random(5)
        for ring in (PolynomialRing(ZZ, 3), PolynomialRing(GF(251), 3)):
            for _ in range(20):
                A = rand_poly(ring, rng, rng.randint(0, 6))
                B = rand_poly(ring, rng, rng.randint(0, 6))
                C = rand_poly(ring, rng, rng.randint(0, 6))
                self.assertEqual(A + B, B + A)
                self.assertEqual((A + B) + C, A + (B + C))
                self.assertEqual(A * B, B * A)
                self.assertEqual((A * B) * C, A * (B * C))
                self.assertEqual(A * (B + C), A * B + A * C)
                self.assertTrue((A + (-A)).is_zero())
                self.assertEqual(A - B, A + (-B))
                for P in (A + B, A - B, A * B, -A):
                    P.check_consistency()

    def test_zero_operands(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        p = 3 * x * y + 1
        self.assertEqual(p + R.zero(), p)
        self.assertEqual(R.zero() + p, p)
        self.assertTrue((p * R.zero()).is_zero())
        # the zero polynomial is exempt from variable count matching
        self.assertEqual(PolynomialRing(ZZ, 5).zero() + p, p)
        self.assertEqual(PolynomialRing(ZZ, 5).zero(), R.zero())

    def test_nvars_mismatch(self):
        p = PolynomialRing(ZZ, 2).variables()[0]
        q = PolynomialRing(ZZ, 3).variables()[0]
        with self.assertRaises(DimensionMismatch):
            p + q
        with self.assertRaises(DimensionMismatch):
            p * q

    def test_coeff_ring_mismatch(self):
        p = PolynomialRing(ZZ, 2).variables()[0] * 4
        q = PolynomialRing(GF(7), 2).variables()[0] * 4
        with self.assertRaises(ValueError):
            p + q
        with self.assertRaises(ValueError):
            p - q
        with self.assertRaises(ValueError):
            p * q
        with self.assertRaises(ValueError):
            divmod(p, q + 1)
        # the zero polynomial is exempt
        self.assertEqual(p + q * 0, p)

    def test_scalars(self):
        R = PolynomialRing(GF(7), 2)
        x, y = R.variables()
        p = 3 * x + y
        self.assertEqual(p * 5, Polynomial(R, [(1, [1, 0]), (5, [0, 1])]))
        self.assertTrue((p * 7).is_zero())
        self.assertEqual(p + 4 - 4, p)
        self.assertEqual(5 - p, Polynomial(R, [(4, [1, 0]), (6, [0, 1]), (5, [0, 0])]))
        self.assertEqual(R.constant(3) + 4, 0)

    def test_overflow(self):
        R = PolynomialRing(ZZ, 1, exponent=U8)
        x = R.monomial(1, [200])
        with self.assertRaises(ExponentOverflow):
            x * x
        with self.assertRaises(ExponentOverflow):
            R.monomial(1, [256])

    def test_pow_and_eval(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        p = (x + 2 * y) ** 3
        self.assertEqual(p(1, 1), 27)
        self.assertEqual(p((2, -1)), 0)
        self.assertEqual(p.degree(0), 3)
        self.assertEqual(p.degree(1), 3)
        self.assertEqual(R.zero().degree(0), 0)

        q = Polynomial(R, [(1, [0, 1]), (1, [2, 0])])
        self.assertEqual(q.degree(0), 2)
        self.assertEqual(q.degree(1), 1)
        for x in (2, -1):
            with self.assertRaises(IndexError):
                q.degree(x)
            with self.assertRaises(IndexError):
                q.ldegree(x)
            with self.assertRaises(IndexError):
                R.zero().degree(x)

    def test_content_and_finite_field(self):
        R = PolynomialRing(ZZ, 1)
        x, = R.variables()
        self.assertEqual((6 * x + 9).content(), 3)
        p = (253 * x**2 + 251 * x + 3).to_finite_field(251)
        self.assertEqual(p.ring.coeff_ring, GF(251))
        self.assertEqual(p.coefficients, [3, 2])
        self.assertEqual(p.exponents, [0, 2])

    def test_inspection(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        self.assertTrue(R.constant(5).is_constant())
        self.assertTrue(R.zero().is_constant())
        self.assertFalse((x + 1).is_constant())
        self.assertTrue(R.one().is_one())
        p = x**2 * y + y**3
        self.assertEqual(p.ldegree(0), 2)
        self.assertEqual(p.ldegree(1), 1)
        self.assertEqual(p.ldegree_max(), 2)
        self.assertEqual(str(x**2 * y + 3), "x0^2*x1 + 3")

class TestTransforms(unittest.TestCase):

    def setUp(self):
        self.R = PolynomialRing(ZZ, 3)
        self.x, self.y, self.z = self.R.variables()

    def test_rearrange_roundtrip(self):
        rng = random.Random(7)
        R = PolynomialRing(GF(251), 4)
        for _ in range(20):
            A = rand_poly(R, rng, 10)
            perm = list(range(4))
            rng.shuffle(perm)
            B = A.rearrange(perm)
            B.check_consistency()
            self.assertEqual(B.rearrange(perm, True), A)

    def test_rearrange(self):
        x, y, z = self.x, self.y, self.z
        p = x**2 * y + 3 * z
        # new x0 takes the powers of x2, new x1 those of x0, new x2 those of x1
        self.assertEqual(p.rearrange([2, 0, 1]), y**2 * z + 3 * x)
        self.assertEqual(p.rearrange([2, 0, 1], True), z**2 * x + 3 * y)

    def test_replace(self):
        x, y, z = self.x, self.y, self.z
        p = x**2 * y + 3 * y + x
        self.assertEqual(p.replace(0, 2), 7 * y + 2)
        self.assertEqual(p.replace(1, 0), x)

    def test_replace_all_except(self):
        x, y, z = self.x, self.y, self.z
        p = x**2 * y + 3 * y + x
        cache = make_power_cache(3, 2)
        self.assertEqual(p.replace_all_except(1, [(0, 2)], cache), 7 * y + 2)
        self.assertEqual(cache[0][1], 2)
        # outside the cache range
        self.assertEqual(cache[0], [None, 2])

        q = x**3 * z + 2 * x * y * z**2 + y**2
        cache = make_power_cache(3, 8)
        for _ in range(2):
            self.assertEqual(q.replace_all_except(2, [(0, 3), (1, 5)], cache), 27 * z + 30 * z**2 + 25)
        self.assertEqual(cache[0][3], 27)
        self.assertEqual(cache[1][2], 25)
        self.assertEqual(q.replace_all_except(2, [(0, 3), (1, 5)]), q.replace(0, 3).replace(1, 5))

    def test_to_univariate(self):
        x, y, z = self.x, self.y, self.z
        p = x**2 * y + 3 * y + x + 5
        parts = p.to_univariate_polynomial(0)
        self.assertEqual(parts, [(3 * y + 5, 0), (self.R.one(), 1), (y, 2)])
        self.assertEqual(sum((c * x**d for c,d in parts), self.R.zero()), p)
        self.assertEqual(self.R.zero().to_univariate_polynomial(1), [])

    def test_variable_out_of_range(self):
        p = self.x**2 * self.y + self.z
        for n in (3, -1):
            with self.assertRaises(IndexError):
                p.replace(n, 2)
            with self.assertRaises(IndexError):
                p.replace_all_except(n, [(0, 2)])
            with self.assertRaises(IndexError):
                p.replace_all_except(0, [(n, 2)])
            with self.assertRaises(IndexError):
                p.to_univariate_polynomial(n)
            with self.assertRaises(IndexError):
                p.to_multivariate_polynomial([0, n])
            with self.assertRaises(IndexError):
                p.lcoeff_last(n)

    def test_to_multivariate(self):
        rng = random.Random(11)
        for _ in range(10):
            p = rand_poly(self.R, rng, 12)
            for include in (True, False):
                parts = p.to_multivariate_polynomial([0, 2], include)
                total = self.R.zero()
                for key,part in parts.items():
                    total += part * self.R.monomial(1, key)
                self.assertEqual(total, p)

        x, y, z = self.x, self.y, self.z
        parts = (x * y + x * z + y).to_multivariate_polynomial([0])
        self.assertEqual(parts, {(1, 0, 0) : y + z, (0, 0, 0) : y})
        parts = (x * y + x * z + y).to_multivariate_polynomial([0], False)
        self.assertEqual(parts, {(0, 1, 0) : x + 1, (0, 0, 1) : x})

class TestLeadingCoefficient(unittest.TestCase):

    def setUp(self):
        self.R = PolynomialRing(ZZ, 2)
        self.x, self.y = self.R.variables()

    def test_lcoeff(self):
        x, y = self.x, self.y
        p = 3 * x * y**2 + 5 * x**2 + 7 * y**3
        self.assertEqual(p.lcoeff(), 5)
        self.assertEqual(p.lcoeff_varorder([0, 1]), 5)
        self.assertEqual(p.lcoeff_varorder([1, 0]), 7)
        self.assertEqual(self.R.zero().lcoeff(), 0)

    def test_lcoeff_varorder_ties(self):
        R = PolynomialRing(ZZ, 3)
        x, y, z = R.variables()
        p = 2 * x * y**2 + 3 * x**2 * y**2 + 4 * x**2 * y + 5 * z**4
        # y first, ties broken by x
        self.assertEqual(p.lcoeff_varorder([1, 0, 2]), 3)
        # z first
        self.assertEqual(p.lcoeff_varorder([2, 1, 0]), 5)

    def test_lcoeff_last(self):
        x, y = self.x, self.y
        q = 2 * x**2 * y + 5 * x**2 + y
        self.assertEqual(q.lcoeff_last(1), 2 * y + 5)
        self.assertEqual(q.lcoeff_last(0), 2 * x**2 + 1)
        self.assertEqual(q.lcoeff_last_varorder([0, 1]), 2 * y + 5)
        self.assertEqual(q.lcoeff_last_varorder([1, 0]), 2 * x**2 + 1)
        self.assertTrue(self.R.zero().lcoeff_last(1).is_zero())

class TestDivision(unittest.TestCase):

    def test_heap_division_univariate(self):
        R = PolynomialRing(ZZ, 1)
        x0, = R.variables()
        for q,r in ((x0**2 - 1).heap_division(x0 - 1), divmod(x0**2 - 1, x0 - 1)):
            self.assertEqual(q, x0 + 1)
            self.assertTrue(r.is_zero())

    def test_exact_multivariate(self):
        R = PolynomialRing(GF(251), 2)
        x, y = R.variables()
        d = x + y
        q, r = divmod((x * y + 1) * d, d)
        self.assertEqual(q, x * y + 1)
        self.assertTrue(r.is_zero())

    def test_monomial_divisor(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        p = 3 * x**2 * y + 2 * x + 5 * y**2
        q, r = divmod(p, x)
        self.assertEqual(q, 3 * x * y + 2)
        self.assertEqual(r, 5 * y**2)
        # coefficient not divisible
        q, r = divmod(p, 2 * x)
        self.assertEqual(q, R.one())
        self.assertEqual(r, 3 * x**2 * y + 5 * y**2)

    def test_divide_by_own_terms(self):
        rng = random.Random(13)
        R = PolynomialRing(ZZ, 3)
        for _ in range(10):
            p = rand_poly(R, rng, 8)
            for c,e in p:
                t = R.monomial(c, e)
                q, r = divmod(p, t)
                self.assertFalse(any(re == e for _,re in r))
                self.assertEqual(q * t + r, p)

    def test_synthetic(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        q, r = (6 * y**2 + 5 * y + 1).synthetic_division(2 * y + 1)
        self.assertEqual(q, 3 * y + 1)
        self.assertTrue(r.is_zero())
        q, r = (y**2 + 1).synthetic_division(2 * y + 1)
        self.assertTrue(q.is_zero())
        self.assertEqual(r, y**2 + 1)
        q, r = (x**5 + 3 * x**2 + 7).synthetic_division(x**2 - x + 1)
        self.assertEqual(q * (x**2 - x + 1) + r, x**5 + 3 * x**2 + 7)
        self.assertLess(r.degree(0), 2)
        with self.assertRaises(ValueError):
            (x * y + 1).synthetic_division(x + 1)

    def test_long_division(self):
        R = PolynomialRing(ZZ, 2)
        x, y = R.variables()
        q, r = divmod(6 * x**2 + 3 * x * y + 5, 2 * x + y)
        self.assertEqual(q, 3 * x)
        self.assertEqual(r, R.constant(5))
        # stops at the first inexact step
        q, r = divmod(x**2 * y + x, 2 * x + y)
        self.assertTrue(q.is_zero())
        self.assertEqual(r, x**2 * y + x)

    def test_roundtrip(self):
        rng = random.Random(17)
        for ring in (PolynomialRing(ZZ, 3), PolynomialRing(GF(251), 3), PolynomialRing(GF(251), 1)):
            for _ in range(30):
                A = rand_poly(ring, rng, rng.randint(0, 10))
                B = rand_poly(ring, rng, rng.randint(1, 4))
                if B.is_zero():
                    continue
                Q, R = divmod(A, B)
                Q.check_consistency()
                R.check_consistency()
                self.assertEqual(Q * B + R, A)
                if B.nterms > 1:
                    for strategy in (A.heap_division, A.long_division):
                        Q, R = strategy(B)
                        self.assertEqual(Q * B + R, A)

    def test_special_cases(self):
        R = PolynomialRing(GF(7), 2)
        x, y = R.variables()
        p = x * y + 3
        with self.assertRaises(ZeroDivisionError):
            divmod(p, R.zero())
        q, r = divmod(R.zero(), p)
        self.assertTrue(q.is_zero() and r.is_zero())
        self.assertEqual(divmod(p, R.one()), (p, R.zero()))
        self.assertEqual(p // 2, 4 * x * y + 5)
        self.assertTrue((p % 2).is_zero())
