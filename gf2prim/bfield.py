"""This module supports primitive polynomials and the binary fields they generate.

A polynomial p over GF(2) of degree q is primitive if it is irreducible and
the residue class of x generates the multiplicative group of GF(2)[x]/(p),
which has order 2^q - 1. Function is_primitive tests the latter property
by computing the multiplicative order of x modulo p, and function
field_elements lists all 2^q elements of the field GF(2^q) generated by p:

    0, 1, x, x^2 mod p, ..., x^(2^q - 2) mod p

Both functions assume that p is irreducible, which is not verified.
Function certify performs both tests and returns a PrimitivePolynomial.
Function GF creates types implementing the binary fields generated
by certified primitive polynomials.
"""

import functools
import logging
from gf2prim import gf2x

ALPHA = 2  # the polynomial x
_CERTIFIED = object()  # token passed by certify() only


def order(p):
    """Multiplicative order of x modulo polynomial p, for p of degree at least 1.

    Return None if x is not invertible modulo p, that is, if x divides p.
    """
    p = gf2x.Polynomial(p)
    group_order = (1 << p.degree()) - 1
    alpha = gf2x.Polynomial(ALPHA, width=p.width)
    current = gf2x.mod(alpha, p)
    k = 1
    while current != 1:
        if k == group_order:
            return None

        current = gf2x.mod(gf2x.mul(current, alpha), p)
        k += 1
    return k


def is_primitive(p):
    """Test irreducible polynomial p for primitivity.

    Return True if p has degree at least 2 and x has multiplicative
    order 2^q - 1 modulo p, where q is the degree of p.
    """
    p = gf2x.Polynomial(p)
    q = p.degree()
    if q < 2:
        return False

    group_order = (1 << q) - 1
    k = order(p)
    logging.debug(f'Order of x modulo {p} is {k}, group order is {group_order}')
    return k == group_order


def field_elements(p):
    """Return the list of elements of the field generated by primitive polynomial p.

    The list starts with 0 and 1, followed by the powers x, x^2, ... of x
    reduced modulo p, up to and excluding the first power equal to 1.
    If p is irreducible but not primitive, fewer than 2^q elements result,
    where q is the degree of p.
    """
    p = gf2x.Polynomial(p)
    group_order = (1 << p.degree()) - 1
    alpha = gf2x.Polynomial(ALPHA, width=p.width)
    one = gf2x.Polynomial(1, width=p.width)
    elements = [gf2x.Polynomial(0, width=p.width), one]
    current = gf2x.mod(alpha, p)
    while current != one:
        if len(elements) > group_order:
            raise ValueError(f'x is not invertible modulo {p}')

        elements.append(current)
        current = gf2x.mod(gf2x.mul(current, alpha), p)
    return elements


class PrimitivePolynomial(gf2x.Polynomial):
    """Polynomial certified to be irreducible and primitive.

    Use function certify() to obtain instances; direct construction raises TypeError.
    """

    __slots__ = ()

    def __init__(self, value, x='x', width=None, _certified=None):
        if _certified is not _CERTIFIED:
            raise TypeError('use certify() to create primitive polynomials')

        super().__init__(value, x, width)

    def __repr__(self):
        return f'PrimitivePolynomial({gf2x.to_terms(self)})'


def certify(p):
    """Return p as a PrimitivePolynomial, provided p is irreducible and primitive.

    Raises ValueError otherwise.
    """
    if isinstance(p, PrimitivePolynomial):
        return p

    p = gf2x.Polynomial(p)
    if not p.is_irreducible():
        raise ValueError(f'{p} is not irreducible')

    if not is_primitive(p):
        raise ValueError(f'{p} is not primitive')

    logging.debug(f'Certified primitive polynomial {p}')
    return PrimitivePolynomial(p, _certified=_CERTIFIED)


def find_primitive(d):
    """Find smallest primitive polynomial of degree d, for d >= 2."""
    if d < 2:
        raise ValueError('degree must be at least 2')

    p = gf2x.next_irreducible((1 << d) - 1)
    while not is_primitive(p):
        p = gf2x.next_irreducible(p)
    return certify(p)


def GF(modulus):
    """Create a Galois (finite) field for given primitive polynomial.

    Calls to GF with identical modulus return the same class.
    """
    return _GF(certify(modulus))


@functools.cache
def _GF(modulus):
    d = modulus.degree()
    GFElement = type(f'GF(2^{d})', (BinaryFieldElement,), {'__slots__': ()})
    GFElement.__doc__ = f'Class of binary field elements modulo {gf2x.to_terms(modulus)}.'
    GFElement.modulus = modulus
    GFElement.ext_deg = d
    GFElement.order = 1 << d
    return GFElement


class BinaryFieldElement:
    """Common base class for binary field elements.

    Invariant: attribute 'value' is reduced.
    """

    __slots__ = 'value'

    modulus = None
    ext_deg = None
    order = None

    def __init__(self, value):
        if isinstance(value, int):
            if not 0 <= value < self.order:
                raise ValueError(f'{value} out of range for {type(self).__name__}')

        value = gf2x.Polynomial(value, width=self.modulus.width)
        self.value = gf2x.mod(value, self.modulus)

    @classmethod
    def elements(cls):
        """List of all field elements, ordered as 0, 1, x, x^2, ... ."""
        return [cls(a) for a in field_elements(cls.modulus)]

    @classmethod
    def generator(cls):
        """Generator x of the multiplicative group of the field."""
        return cls(ALPHA)

    def __int__(self):
        """Extract polynomial field element as an integer."""
        return self.value.value

    def __add__(self, other):
        """Addition."""
        if isinstance(other, type(self)):
            return type(self)(self.value + other.value)

        if isinstance(other, int):
            return type(self)(self.value + type(self)(other).value)

        return NotImplemented

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other):
        """Multiplication."""
        if isinstance(other, type(self)):
            other = other.value
        elif isinstance(other, int):
            other = type(self)(other).value
        else:
            return NotImplemented

        return type(self)(gf2x.mulmod(self.value, other, self.modulus))

    __rmul__ = __mul__

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(gf2x.powmod(self.value, other, self.modulus))

    def __neg__(self):
        """Negation."""
        return type(self)(self.value)

    def __truediv__(self, other):
        """Division."""
        if isinstance(other, type(self)):
            return self * other._reciprocal()

        if isinstance(other, int):
            return self * type(self)(other)._reciprocal()

        return NotImplemented

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        if isinstance(other, int):
            return type(self)(other) * self._reciprocal()

        return NotImplemented

    def _reciprocal(self):
        """Multiplicative inverse."""
        return type(self)(gf2x.invert(self.value, self.modulus))

    def __repr__(self):
        return f'{self.value}'

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, type(self)):
            return self.value == other.value

        if isinstance(other, int):
            return self.value == other

        return NotImplemented

    def __hash__(self):
        """Hash value."""
        return hash((type(self), self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        Field elements can thus be used directly in Boolean formulas.
        """
        return bool(self.value)
