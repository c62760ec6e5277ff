"""This module supports arithmetic with polynomials over GF(2).

Polynomials over GF(2) are represented as nonnegative integers of bounded
bit width. The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0,
where n < w for bit width w (default WIDTH, which is 64 unless set
by environment variable GF2PRIM_WIDTH or by option --width).

The operators +, -, *, //, %, <<, >> and function divmod are overloaded,
as well as the comparison operators and indexing
to extract individual bits (coefficients). Polynomials are immutable.
Shifting left drops the bits moved beyond the bit width, whereas
multiplication raises OverflowError if the product does not fit.
The degree of the zero polynomial is 0, just like for the polynomial 1.

A remainder is only defined for divisors of degree at least 1.
Powers, inverses and GCDs modulo a polynomial are computed using
double-width intermediate results. A simple irreducibility test is
provided as well as a basic routine to find the next irreducible polynomial.
"""

import os

WIDTH = int(os.getenv('GF2PRIM_WIDTH', '64'))


def _value(a, width=None):
    if isinstance(a, Polynomial):
        return a.value

    _check_range(a, WIDTH if width is None else width)
    return a


def _check_range(a, width):
    if not 0 <= a < 1 << width:
        raise ValueError(f'polynomial does not fit in bit width {width}')


def _width(*args):
    return max((a.width for a in args if isinstance(a, Polynomial)), default=WIDTH)


def add(a, b):
    """Add polynomials a and b."""
    width = _width(a, b)
    return Polynomial(_value(a, width) ^ _value(b, width), width=width)


def shift(a, k):
    """Multiply polynomial a by x^k, dropping terms of degree w or higher."""
    width = _width(a)
    return Polynomial(_shift(_value(a, width), k, width), width=width)


def _shift(a, k, width):
    if k < 0:
        raise ValueError('negative shift count')

    return (a << k) & ((1 << width) - 1)


def mul(a, b):
    """Multiply polynomials a and b.

    Raises OverflowError if the degree of the product is w or higher.
    """
    width = _width(a, b)
    c = _mul(_value(a, width), _value(b, width))
    if c >> width:
        raise OverflowError(f'product of degree {_degree(c)} exceeds bit width {width}')

    return Polynomial(c, width=width)


multiply = mul


def _mul(a, b):
    if a < b:
        a, b = b, a
    # a >= b
    c = 0
    while b:
        if b & 1:
            c ^= a
        a <<= 1
        b >>= 1
    return c


def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for b of degree at least 1."""
    width = _width(a, b)
    return Polynomial(_mod(_value(a, width), _value(b, width)), width=width)


remainder = mod


def _check_divisor(b):
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')

    if b == 1:
        raise ZeroDivisionError('invalid divisor of degree 0')


def _mod(a, b):
    if b is None:  # see _powmod()
        return a

    _check_divisor(b)
    m = _degree(a)
    n = _degree(b)
    if m < n:
        return a

    b <<= m - n
    for i in range(m - n + 1):
        if (a >> m - i) & 1:
            a ^= b
        b >>= 1
    return a


def divmod_(a, b):
    """Divide polynomial a by polynomial b with remainder, for b of degree at least 1."""
    width = _width(a, b)
    q, r = _divmod(_value(a, width), _value(b, width))
    return Polynomial(q, width=width), Polynomial(r, width=width)


def _divmod(a, b):
    _check_divisor(b)
    m = _degree(a)
    n = _degree(b)
    if m < n:
        return 0, a

    b <<= m - n
    q = 0
    for i in range(m - n + 1):
        q <<= 1
        if (a >> m - i) & 1:
            a ^= b
            q ^= 1
        b >>= 1
    return q, a


def mulmod(a, b, c):
    """Multiply polynomials a and b modulo polynomial c, for c of degree at least 1.

    The product is formed with a double-width intermediate, hence never overflows.
    """
    width = _width(a, b, c)
    c = _mulmod(_value(a, width), _value(b, width), _value(c, width))
    return Polynomial(c, width=width)


def _mulmod(a, b, c):
    return _mod(_mul(a, b), c)


def gcd(a, b):
    """Greatest common divisor of polynomials a and b."""
    width = _width(a, b)
    return Polynomial(_gcd(_value(a, width), _value(b, width)), width=width)


def _gcd(a, b):
    while b > 1:
        a, b = b, _mod(a, b)
    if b == 1:
        return 1

    return a


def invert(a, b):
    """Inverse of polynomial a modulo polynomial b, for b of degree at least 1."""
    width = _width(a, b)
    return Polynomial(_invert(_value(a, width), _value(b, width)), width=width)


def _invert(a, b):
    _check_divisor(b)
    s, s1 = 1, 0
    while b > 1:
        q, r = _divmod(a, b)
        a, b = b, r
        s, s1 = s1, s ^ _mul(q, s1)
    if b == 1:
        # remainder 1 reached: gcd is 1, inverse is s1
        return s1

    if a != 1:
        raise ZeroDivisionError('inverse does not exist')

    return s


def powmod(a, n, b):
    """Raise polynomial a to the power of n modulo polynomial b, for b of degree at least 1."""
    width = _width(a, b)
    return Polynomial(_powmod(_value(a, width), n, _value(b, width)), width=width)


def _powmod(a, n, b=None):
    if n == 0:
        return 1

    if n < 0:
        if b is None:
            raise ValueError('negative exponent')

        a = _invert(a, b)
        n = -n
    d = a
    c = 1
    for i in range(n.bit_length() - 1):
        # d = a ** (1 << i) holds
        if n & (1 << i):
            c = _mul(c, d)
            c = _mod(c, b)
        d = _mul(d, d)
        d = _mod(d, b)
    c = _mul(c, d)
    c = _mod(c, b)
    return c


def to_terms(a, x='x'):
    """Convert polynomial a to a string with sum of powers of x."""
    return _to_terms(_value(a), x)


def _to_terms(a, x='x'):
    if a == 0:
        return '0'

    p = ''
    for i in range(a.bit_length(), -1, -1):
        if (a >> i) & 1:
            if i == 0:
                p += '+1'     # x^0 = 1
            elif i == 1:
                p += f'+{x}'  # x^1 = x
            else:
                p += f'+{x}^{i}'
    return p[1:]


def from_terms(s, x='x', width=None):
    """Convert string s with sum of powers of x to a polynomial."""
    return Polynomial(_from_terms(s, x), width=width)


def _from_terms(s, x='x'):
    s = ''.join(s.split())  # remove all whitespace
    a = 0
    for term in s.split('+'):
        if term == '0':
            t = 0
        elif term == '1':
            t = 1  # 2^0
        elif term == x:
            t = 2  # 2^1
        elif term.startswith(f'{x}^'):
            t = 1 << int(term[len(x)+1:], base=0)
        else:  # illegal term
            raise ValueError('ill formatted polynomial')

        if a & t:  # repeated term
            raise ValueError('ill formatted polynomial')

        a ^= t
    return a


def to_bits(a, deg=None):
    """Convert polynomial a to a string of coefficients in increasing degree order.

    The string has deg+1 bits, where deg defaults to the degree of a.
    """
    a = _value(a)
    if deg is None:
        deg = _degree(a)
    return ''.join('1' if (a >> i) & 1 else '0' for i in range(deg + 1))


def from_bits(s, width=None):
    """Convert string s of coefficients in increasing degree order to a polynomial.

    For example, '1101' represents 1 + x + x^3.
    """
    if not s or s.strip('01'):
        raise ValueError('ill formatted bit string')

    return Polynomial(int(s[::-1], base=2), width=width)


def degree(a):
    """Degree of polynomial a (0 if a is zero)."""
    return _degree(_value(a))


def _degree(a):
    return max(a.bit_length() - 1, 0)


def is_irreducible(a):
    """Test polynomial a for irreducibility."""
    return _is_irreducible(_value(a))


def _is_irreducible(a):
    if a <= 1:
        return False

    if a <= 3:
        return True  # x and x+1

    if not a & 1:
        return False  # divisible by x

    b = 2
    for _ in range(_degree(a) // 2):
        b = _mulmod(b, b, a)
        if _gcd(b ^ 2, a) != 1:
            return False

    return True


def next_irreducible(a):
    """Return next irreducible polynomial > a.

    NB: 'x' < 'x+1' < 'x^2+x+1' < 'x^3+x+1' < 'x^3+x^2+1' < ...
    """
    width = _width(a)
    return Polynomial(_next_irreducible(_value(a, width)), width=width)


def _next_irreducible(a):
    if a <= 2:
        a += 1
    else:
        a += 1 + (a % 2)
        while not _is_irreducible(a):
            a += 2
    return a


class Polynomial:
    """Polynomials over GF(2) represented as nonnegative integers of bounded bit width."""

    __slots__ = 'value', 'width'

    def __init__(self, value=0, x='x', width=None):
        if isinstance(value, Polynomial):
            if width is None:
                width = value.width
            value = value.value
        elif isinstance(value, str):
            value = _from_terms(value, x)
        elif not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'cannot convert {type(value).__name__} to polynomial')

        if width is None:
            width = WIDTH
        if not 0 <= value < 1 << width:
            raise ValueError(f'polynomial does not fit in bit width {width}')

        self.value = value
        self.width = width

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return _degree(self.value)

    def is_zero(self):
        """Test for the zero polynomial."""
        return self.value == 0

    def is_irreducible(self):
        """Test polynomial for irreducibility."""
        return _is_irreducible(self.value)

    def _coerce(self, other, check=True):
        # Return the value of other, or None if other is not a polynomial or int.
        if isinstance(other, Polynomial):
            return other.value

        if isinstance(other, int) and not isinstance(other, bool):
            if check:
                _check_range(other, self.width)
            return other

        return None

    def _new(self, value, other=None):
        width = self.width
        if isinstance(other, Polynomial):
            width = max(width, other.width)
        return Polynomial(value, width=width)

    def __int__(self):
        return self.value

    def __getitem__(self, i):
        """Coefficient of x^i."""
        if not 0 <= i < self.width:
            raise IndexError('coefficient index out of range')

        return (self.value >> i) & 1

    def __add__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented

        return self._new(self.value ^ b, other)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other):
        if self._coerce(other) is None:
            return NotImplemented

        return mul(self, other)

    def __rmul__(self, other):
        if self._coerce(other) is None:
            return NotImplemented

        return mul(other, self)

    def __mod__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented

        return self._new(_mod(self.value, b), other)

    def __rmod__(self, other):
        a = self._coerce(other)
        if a is None:
            return NotImplemented

        return self._new(_mod(a, self.value), other)

    def __floordiv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented

        return self._new(_divmod(self.value, b)[0], other)

    def __divmod__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented

        q, r = _divmod(self.value, b)
        return self._new(q, other), self._new(r, other)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(_shift(self.value, other, self.width), width=self.width)

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative shift count')

        return Polynomial(self.value >> other, width=self.width)

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value >= b

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value > b

    def __le__(self, other):
        """Less-than or equal comparison."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value <= b

    def __lt__(self, other):
        """Strictly less-than comparison."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value < b

    def __repr__(self):
        return _to_terms(self.value)

    def __eq__(self, other):
        """Equality test."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value == b

    def __ne__(self, other):
        """Negated equality testing."""
        b = self._coerce(other, check=False)
        if b is None:
            return NotImplemented

        return self.value != b

    def __hash__(self):
        """Hash value, consistent with equality to ints."""
        return hash(self.value)

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
