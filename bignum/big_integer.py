"""
A BigInteger is a signed integer of any size, in base 10**9 limbs.

    assert '100000000000000000000' == str(BigInteger('99999999999999999999') + 1)

Features:
 - arbitrary precision
 - sign-magnitude, no negative zero
 - immutable
 - division truncates toward zero, remainder takes the dividend's sign (C style, not Python style)
"""

import operator

from . import limbs
from .check import check
from .result import Result


UINT64_MAX = 2 ** 64 - 1
INT64_MAX = 2 ** 63 - 1
INT64_MIN = -2 ** 63

DECIMAL_DIGITS = frozenset('0123456789')


class BigInteger(object):
    """
    Integers with no size limit.

    Internally a list of limbs, least significant first, each in range(10**9),
    plus a negative flag.
        Example:  BigInteger(1234567890123) has limbs (567890123, 1234) and negative False.

    Construct from:
        int                 BigInteger(42)
        decimal string      BigInteger('-12345678901234567890')
        another BigInteger  BigInteger(BigInteger(42))
        nothing             BigInteger() is zero

    Bad strings raise BigInteger.ConstructorValueError.
    To get a Result instead, use BigInteger.from_string().

    Operators + - * // % ** divmod() abs() and comparisons all work, with int operands too.
    But beware // and % truncate toward zero:

        assert BigInteger(-3) == BigInteger(-7) // 2     # int would say -4
        assert BigInteger(-1) == BigInteger(-7) % 2      # int would say +1
    """

    __slots__ = ('_limbs', '_negative')

    def __init__(self, content=0):
        if isinstance(content, BigInteger):
            self._limbs = content._limbs
            self._negative = content._negative
        elif isinstance(content, int):
            self._limbs = limbs.from_int(abs(content))
            self._negative = content < 0
        elif isinstance(content, str):
            result = self._parse(content)
            if result.is_err():
                raise self.ConstructorValueError("{} is not an integer:  {}".format(
                    repr(content),
                    result.error,
                ))
            self._limbs = result.value._limbs
            self._negative = result.value._negative
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. BigInteger(1.5) or BigInteger(None)"""

    class ConstructorValueError(ValueError):
        """e.g. BigInteger('12x') or BigInteger('-')"""

    @classmethod
    def _from_magnitude(cls, magnitude, negative):
        """
        Wrap a limb list and a sign.  Every computed result comes through here.

        This is the one place that forbids negative zero.
        """
        return_value = cls.__new__(cls)
        return_value._limbs = limbs.trim(list(magnitude))
        return_value._negative = bool(negative) and not limbs.is_zero(return_value._limbs)
        return return_value

    @classmethod
    def power_of_ten(cls, k):
        """10**k, for k >= 0"""
        return cls._from_magnitude(limbs.power_of_ten(k), False)

    @property
    def limbs(self):
        """Base 10**9 digits, least significant first.  assert (0, 1) == BigInteger(10**9).limbs"""
        return tuple(self._limbs)

    @property
    def negative(self):
        return self._negative

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self.to_string()

    def __setstate__(self, text):
        """For the 'pickle' package, object serialization."""
        parsed = self._parse(text).value
        self._limbs = parsed._limbs
        self._negative = parsed._negative

    def __repr__(self):
        return "BigInteger('{}')".format(self.to_string())

    def __str__(self):
        return self.to_string()

    def to_json(self):
        return int(self)

    # Text
    # ----
    @classmethod
    def from_string(cls, s):
        """
        Parse decimal digits with an optional leading minus.  Returns a Result.

        assert BigInteger(42) == BigInteger.from_string('42').value
        assert 'invalid digit' == BigInteger.from_string('4x2').error

        Leading zeros are fine on input, and all zeros is zero, even '-000'.
        No plus sign, no spaces, no underscores.
        """
        return cls._parse(s)

    @classmethod
    def _parse(cls, s):
        if len(s) == 0:
            return Result.err("empty string")
        negative = False
        body = s
        if body[0] == '-':
            negative = True
            body = body[1:]
            if len(body) == 0:
                return Result.err("missing digits after minus sign")
        digits = body.lstrip('0')
        if len(digits) == 0:
            return Result.ok(cls._from_magnitude([0], False))

        magnitude = []
        end = len(digits)
        while end > 0:
            start = max(end - limbs.DIGITS_PER_LIMB, 0)
            chunk = digits[start:end]
            if not DECIMAL_DIGITS.issuperset(chunk):
                return Result.err("invalid digit")
            magnitude.append(int(chunk))
            end = start
        return Result.ok(cls._from_magnitude(magnitude, negative))

    def to_string(self):
        """
        Canonical decimal digits.

        The top limb prints as is.  Every lower limb prints as exactly 9 digits.
        """
        top = str(self._limbs[-1])
        lower = ''.join('{:09d}'.format(limb) for limb in reversed(self._limbs[:-1]))
        return ('-' if self._negative else '') + top + lower

    # Comparison
    # ----------
    def compare(self, other):
        """-1, 0, or +1 as self is less than, equal to, or greater than other."""
        other = type(self)(other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        magnitude_order = limbs.compare(self._limbs, other._limbs)
        return -magnitude_order if self._negative else magnitude_order

    def _compare_op(self, op, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return op(self.compare(other), 0)

    def __eq__(self, other): return self._compare_op(operator.__eq__, other)
    def __ne__(self, other): return self._compare_op(operator.__ne__, other)
    def __lt__(self, other): return self._compare_op(operator.__lt__, other)
    def __le__(self, other): return self._compare_op(operator.__le__, other)
    def __gt__(self, other): return self._compare_op(operator.__gt__, other)
    def __ge__(self, other): return self._compare_op(operator.__ge__, other)

    def __hash__(self):
        """Same as the equivalent int, so BigInteger(5) and 5 are the same dictionary key."""
        return hash(int(self))

    # Math
    # ----
    def is_zero(self):
        return limbs.is_zero(self._limbs)

    def is_negative(self):
        return self._negative

    def sign(self):
        """-1, 0, or +1"""
        if self.is_zero():
            return 0
        return -1 if self._negative else 1

    def abs(self):
        return self._from_magnitude(self._limbs, False)

    def negate(self):
        return self._from_magnitude(self._limbs, not self._negative)

    def add(self, other):
        """
        Same signs add magnitudes.

        Opposite signs subtract the smaller magnitude from the larger,
        and the answer takes the sign of the larger.
        """
        other = type(self)(other)
        if self._negative == other._negative:
            return self._from_magnitude(limbs.add(self._limbs, other._limbs), self._negative)
        elif limbs.abs_less(self._limbs, other._limbs):
            return self._from_magnitude(limbs.subtract(other._limbs, self._limbs), other._negative)
        else:
            return self._from_magnitude(limbs.subtract(self._limbs, other._limbs), self._negative)

    def subtract(self, other):
        return self.add(type(self)(other).negate())

    def multiply(self, other):
        other = type(self)(other)
        return self._from_magnitude(
            limbs.multiply(self._limbs, other._limbs),
            self._negative != other._negative,
        )

    def divide_modulo(self, other):
        """
        (quotient, remainder), truncating toward zero.

        The quotient is negative when the signs differ.
        The remainder has the sign of the dividend (self), or is zero.
        So quotient * other + remainder == self, always.

        Dividing by zero fails a check(), it does not return anything.
        """
        other = type(self)(other)
        check(not other.is_zero(), "division by zero")
        quotient, remainder = limbs.divide_modulo(self._limbs, other._limbs)
        return (
            self._from_magnitude(quotient, self._negative != other._negative),
            self._from_magnitude(remainder, self._negative),
        )

    def divide(self, other):
        return self.divide_modulo(other)[0]

    def modulo(self, other):
        return self.divide_modulo(other)[1]

    def power(self, exponent):
        """
        self ** exponent, by repeated squaring.  Returns a Result.

        assert BigInteger(1024) == BigInteger(2).power(10).value
        assert BigInteger(-8) == BigInteger(-2).power(3).value
        assert Result.err("exponent cannot be negative") == BigInteger(2).power(-1)
        """
        exponent = type(self)(exponent)
        if exponent.is_negative():
            return Result.err("exponent cannot be negative")
        result = [1]
        square = self._limbs
        remaining = exponent._limbs
        while not limbs.is_zero(remaining):
            remaining, bit = limbs.divmod_small(remaining, 2)
            if bit:
                result = limbs.multiply(result, square)
            if not limbs.is_zero(remaining):
                square = limbs.multiply(square, square)
        is_odd = exponent._limbs[0] % 2 == 1
        # NOTE:  BASE is even, so the lowest limb alone decides odd or even.
        return Result.ok(self._from_magnitude(result, self._negative and is_odd))

    def shift_left(self, k):
        """Multiply by (10**9)**k, a whole number of limbs."""
        return self._from_magnitude(limbs.shift_left(self._limbs, k), self._negative)

    def _power_value(self, exponent):
        """For the ** operator, which has nowhere to put an error but an exception."""
        return self.power(exponent).value

    @classmethod
    def _operand(cls, x):
        """Operand-ready version of x, or None if BigInteger math can't handle it."""
        if isinstance(x, BigInteger):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            return None

    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        """Two-input operator.  NotImplemented lets e.g. DecimalNumber take a crack at it."""
        left = cls._operand(input_left)
        right = cls._operand(input_right)
        if left is None or right is None:
            return NotImplemented
        return method(left, right)

    def __pos__(self): return self
    def __neg__(self): return self.negate()
    def __abs__(self): return self.abs()

    def __add__(self, other): return self._binary_op(BigInteger.add, self, other)
    def __radd__(self, other): return self._binary_op(BigInteger.add, other, self)
    def __sub__(self, other): return self._binary_op(BigInteger.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(BigInteger.subtract, other, self)
    def __mul__(self, other): return self._binary_op(BigInteger.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(BigInteger.multiply, other, self)
    def __floordiv__(self, other): return self._binary_op(BigInteger.divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(BigInteger.divide, other, self)
    def __mod__(self, other): return self._binary_op(BigInteger.modulo, self, other)
    def __rmod__(self, other): return self._binary_op(BigInteger.modulo, other, self)
    def __divmod__(self, other): return self._binary_op(BigInteger.divide_modulo, self, other)
    def __rdivmod__(self, other): return self._binary_op(BigInteger.divide_modulo, other, self)
    def __pow__(self, other): return self._binary_op(BigInteger._power_value, self, other)
    def __rpow__(self, other): return self._binary_op(BigInteger._power_value, other, self)

    # "to" conversions:  BigInteger --> other type
    # ---------------------------------------------
    def __int__(self):
        magnitude = limbs.to_int(self._limbs)
        return -magnitude if self._negative else magnitude

    def __float__(self):
        """Lossy.  Huge values become inf."""
        return float(self.to_string())

    def __bool__(self):
        return not self.is_zero()

    def to_uint64(self):
        """As an int in range(2**64), or an error Result.  Never wraps."""
        if self._negative:
            return Result.err("negative value cannot be converted to uint64")
        if limbs.compare(self._limbs, _UINT64_MAX_LIMBS) > 0:
            return Result.err("value exceeds uint64 max")
        return Result.ok(limbs.to_int(self._limbs))

    def to_int64(self):
        """
        As an int in range(-2**63, 2**63), or an error Result.  Never wraps.

        The minimum, -2**63, is fine even though +2**63 is not.
        """
        if self._negative:
            order = limbs.compare(self._limbs, _INT64_MIN_MAGNITUDE_LIMBS)
            if order > 0:
                return Result.err("value exceeds int64 range")
            elif order == 0:
                return Result.ok(INT64_MIN)
            else:
                return Result.ok(-limbs.to_int(self._limbs))
        else:
            if limbs.compare(self._limbs, _INT64_MAX_LIMBS) > 0:
                return Result.err("value exceeds int64 max")
            return Result.ok(limbs.to_int(self._limbs))

    def div_to_float(self, other):
        """
        Approximate self / other as a float.  Returns a Result.

        Unlike divide(), a zero divisor here is just an error Result.
        """
        other = type(self)(other)
        if other.is_zero():
            return Result.err("division by zero in div_to_float")
        return Result.ok(float(self) / float(other))


_UINT64_MAX_LIMBS = limbs.from_int(UINT64_MAX)
_INT64_MAX_LIMBS = limbs.from_int(INT64_MAX)
_INT64_MIN_MAGNITUDE_LIMBS = limbs.from_int(-INT64_MIN)


def type_name(x):
    """
    Describe (very briefly) what type of object this is.

    assert 'int' == type_name(3)
    """
    return type(x).__name__
