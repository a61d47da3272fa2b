"""
A DecimalNumber is a BigInteger mantissa times a power of ten.

    assert '0.001' == str(DecimalNumber('1e-3'))
    assert '3.3333333333' == str(DecimalNumber(10) / 3)

Exact for addition, subtraction, and multiplication.
Division truncates to a fixed number of fractional digits, 10 unless you say otherwise.
"""

import operator
import sys

from .big_integer import BigInteger, DECIMAL_DIGITS, type_name
from .check import check
from .limbs import DIGITS_PER_LIMB
from .result import Result


class DecimalNumber(object):
    """
    Decimal fractions with no size or precision limit.

    value = mantissa * 10**exponent

    Always normalized:  the mantissa has no trailing decimal zeros,
    they get moved into the exponent.  Zero is always 0 * 10**0.
    So each value has exactly one (mantissa, exponent) pair.
        Example:  DecimalNumber('1.50') has mantissa 15 and exponent -1.
        Example:  DecimalNumber('1500') has mantissa 15 and exponent 2.

    Construct from:
        int                    DecimalNumber(42)
        BigInteger             DecimalNumber(BigInteger(42))
        decimal string         DecimalNumber('-1.25e-3')
        another DecimalNumber  DecimalNumber(DecimalNumber('0.5'))
        nothing                DecimalNumber() is zero
        mantissa and exponent  DecimalNumber.from_parts(BigInteger(15), -1)

    Bad strings raise DecimalNumber.ConstructorValueError.
    To get a Result instead, use DecimalNumber.from_string().

    Floats are not accepted.  DecimalNumber(0.1) would faithfully store the wrong number.
    """

    __slots__ = ('_mantissa', '_exponent')

    DEFAULT_PRECISION = 10   # fractional digits kept by the / operator, div(), and div_round()

    EXPONENT_MIN = -2 ** 31
    EXPONENT_MAX = 2 ** 31 - 1
    # NOTE:  The exponent is a Python int, but power() and parsing hold it to 32 signed bits.

    def __init__(self, content=0):
        if isinstance(content, DecimalNumber):
            self._mantissa = content._mantissa
            self._exponent = content._exponent
        elif isinstance(content, (BigInteger, int)):
            self._mantissa = BigInteger(content)
            self._exponent = 0
            self._normalize()
        elif isinstance(content, str):
            result = self._parse(content)
            if result.is_err():
                raise self.ConstructorValueError("{} is not a decimal number:  {}".format(
                    repr(content),
                    result.error,
                ))
            self._mantissa = result.value._mantissa
            self._exponent = result.value._exponent
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. DecimalNumber(0.1) or DecimalNumber([])"""

    class ConstructorValueError(ValueError):
        """e.g. DecimalNumber('1.2.3') or DecimalNumber('5.')"""

    @classmethod
    def from_parts(cls, mantissa, exponent, normalize=True):
        """
        Construct mantissa * 10**exponent.

        normalize=False keeps the pair as given, e.g. for testing normalized().
        """
        return_value = cls.__new__(cls)
        return_value._mantissa = BigInteger(mantissa)
        return_value._exponent = int(exponent)
        if normalize:
            return_value._normalize()
        return return_value

    @property
    def mantissa(self):
        return self._mantissa

    @property
    def exponent(self):
        return self._exponent

    def _normalize(self):
        """
        Move factors of ten from the mantissa into the exponent.  Zero gets exponent 0.

        This operates in-place, modifying self.  So there are no return values.
        Only call it on an instance under construction.
        """
        if self._mantissa.is_zero():
            self._exponent = 0
            return
        while True:
            quotient, remainder = self._mantissa.divide_modulo(TEN)
            if not remainder.is_zero():
                break
            self._mantissa = quotient
            self._exponent += 1

    def normalized(self):
        """
        Return a normalized version of this number.  A no-op if it already is, which is normal.

        assert (15, -1) == DecimalNumber.from_parts(150, -2, normalize=False).normalized().parts()
        """
        return self.from_parts(self._mantissa, self._exponent, normalize=True)

    def parts(self):
        """(mantissa, exponent) as a pair of ints."""
        return int(self._mantissa), self._exponent

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self.to_string()

    def __setstate__(self, text):
        """For the 'pickle' package, object serialization."""
        parsed = self._parse(text).value
        self._mantissa = parsed._mantissa
        self._exponent = parsed._exponent

    def __repr__(self):
        return "DecimalNumber('{}')".format(self.to_string())

    def __str__(self):
        return self.to_string()

    def to_json(self):
        """A string, so JSON consumers that read numbers as floats lose nothing."""
        return self.to_string()

    # Text
    # ----
    @classmethod
    def from_string(cls, s):
        """
        Parse a decimal number.  Returns a Result.

        Syntax:  [-+] digits [. digits] [eE [-+] digits]

        Either side of the point may have the digits, but a point needs digits after it:
            assert DecimalNumber('0.5') == DecimalNumber.from_string('.5').value
            assert 'decimal point without fractional digits' == DecimalNumber.from_string('5.').error
        """
        return cls._parse(s)

    @classmethod
    def _parse(cls, s):
        if len(s) == 0:
            return Result.err("empty string")
        negative = False
        body = s
        if body[0] in '-+':
            negative = body[0] == '-'
            body = body[1:]
            if len(body) == 0:
                return Result.err("sign only")

        exponent = 0
        marker = _find_exponent_marker(body)
        if marker is None:
            mantissa_text = body
        else:
            mantissa_text = body[:marker]
            exponent_text = body[marker + 1:]
            if len(exponent_text) == 0:
                return Result.err("exponent missing")
            exponent_digits = exponent_text[1:] if exponent_text[0] in '-+' else exponent_text
            if len(exponent_digits) == 0:
                return Result.err("exponent sign only")
            if not DECIMAL_DIGITS.issuperset(exponent_digits):
                return Result.err("invalid exponent digit")
            if len(exponent_digits.lstrip('0')) > len(str(cls.EXPONENT_MAX)):
                return Result.err("exponent out of range")
            exponent = int(exponent_text)
            # NOTE:  The real range check waits for the fraction digits and normalization.
            #        '1.5e2147483648' is 15e2147483647, fine.  '10e2147483647' is not.

        if len(mantissa_text) == 0:
            return Result.err("no digits")

        if '.' in mantissa_text:
            if mantissa_text.count('.') > 1:
                return Result.err("multiple decimal points")
            integer_digits, fraction_digits = mantissa_text.split('.')
            if not DECIMAL_DIGITS.issuperset(integer_digits):
                return Result.err("invalid integer digit")
            if len(fraction_digits) == 0:
                return Result.err("decimal point without fractional digits")
            if not DECIMAL_DIGITS.issuperset(fraction_digits):
                return Result.err("invalid fractional digit")
        else:
            integer_digits, fraction_digits = mantissa_text, ''
            if not DECIMAL_DIGITS.issuperset(integer_digits):
                return Result.err("invalid digit")

        exponent -= len(fraction_digits)
        mantissa = BigInteger.from_string((integer_digits or '0') + fraction_digits)
        parsed = mantissa.map(lambda m: cls.from_parts(m.negate() if negative else m, exponent))
        return parsed.and_then(cls._exponent_in_range)

    @classmethod
    def _exponent_in_range(cls, d):
        """Result.ok(d) if its stored exponent fits in 32 signed bits."""
        if not cls.EXPONENT_MIN <= d._exponent <= cls.EXPONENT_MAX:
            return Result.err("exponent out of range")
        return Result.ok(d)

    def to_string(self):
        """
        Canonical form.  Never exponent notation, never trailing fractional zeros.

        assert '1500' == DecimalNumber('1.5e3').to_string()
        assert '-0.015' == DecimalNumber('-1.5e-2').to_string()
        """
        if self._mantissa.is_zero():
            return '0'
        digits = self._mantissa.abs().to_string()
        if self._exponent >= 0:
            text = digits + '0' * self._exponent
        else:
            places = -self._exponent
            if places >= len(digits):
                text = '0.' + '0' * (places - len(digits)) + digits
            else:
                text = digits[:-places] + '.' + digits[-places:]
            text = text.rstrip('0').rstrip('.')
        if self._mantissa.is_negative() and text != '0':
            text = '-' + text
        return text

    # Comparison
    # ----------
    @staticmethod
    def align_exponent(a, b):
        """
        Scale two DecimalNumbers to a common exponent, the smaller one.

        Returns (common_exponent, a_mantissa, b_mantissa).
        The mantissas are BigIntegers, and a_mantissa * 10**common_exponent == a, etc.
        """
        common = min(a._exponent, b._exponent)
        a_mantissa = a._mantissa
        if a._exponent > common:
            a_mantissa = a_mantissa.multiply(BigInteger.power_of_ten(a._exponent - common))
        b_mantissa = b._mantissa
        if b._exponent > common:
            b_mantissa = b_mantissa.multiply(BigInteger.power_of_ten(b._exponent - common))
        return common, a_mantissa, b_mantissa

    def compare(self, other):
        """-1, 0, or +1 as self is less than, equal to, or greater than other."""
        other = type(self)(other)
        if self._exponent == other._exponent:
            return self._mantissa.compare(other._mantissa)
        self_sign = self.sign()
        other_sign = other.sign()
        if self_sign != other_sign:
            return -1 if self_sign < other_sign else 1
        if self_sign == 0:
            return 0
        self_place = self._leading_place()
        other_place = other._leading_place()
        if self_place != other_place:
            magnitude_order = -1 if self_place < other_place else 1
            return magnitude_order * self_sign
            # NOTE:  Settled without aligning, which for 1e2000000000 vs 1 would build a 2-billion-digit mantissa.
        _, self_mantissa, other_mantissa = self.align_exponent(self, other)
        return self_mantissa.compare(other_mantissa)

    def _leading_place(self):
        """
        Decimal digits in the mantissa plus the exponent.  Nonzero magnitude is in [10**(p-1), 10**p).

        assert 3 == DecimalNumber('123.4')._leading_place()
        """
        return _digit_count(self._mantissa) + self._exponent

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
        """Whole values hash like the equivalent int, so DecimalNumber(5), BigInteger(5) and 5 collide."""
        canonical = self.normalized()
        if canonical._exponent >= 0:
            return hash(int(canonical._mantissa) * pow(10, canonical._exponent, sys.hash_info.modulus))
            # NOTE:  int hashes are reduced modulo sys.hash_info.modulus, so 10**exponent
            #        can be reduced first.  Same hash as the whole int, without building it.
        return hash((int(canonical._mantissa), canonical._exponent))

    # Math
    # ----
    def is_zero(self):
        return self._mantissa.is_zero()

    def is_negative(self):
        return self._mantissa.is_negative()

    def sign(self):
        return self._mantissa.sign()

    def abs(self):
        return self.from_parts(self._mantissa.abs(), self._exponent, normalize=False)

    def negate(self):
        return self.from_parts(self._mantissa.negate(), self._exponent, normalize=False)

    def integer_part(self):
        """
        The whole-number part, as a BigInteger, truncated toward zero.

        assert BigInteger(123) == DecimalNumber('123.456').integer_part()
        assert BigInteger(0) == DecimalNumber('-0.789').integer_part()
        """
        if self._exponent >= 0:
            return self._mantissa.multiply(BigInteger.power_of_ten(self._exponent))
        else:
            return self._mantissa.divide(BigInteger.power_of_ten(-self._exponent))

    def add(self, other):
        other = type(self)(other)
        common, self_mantissa, other_mantissa = self.align_exponent(self, other)
        return self.from_parts(self_mantissa.add(other_mantissa), common)

    def subtract(self, other):
        other = type(self)(other)
        common, self_mantissa, other_mantissa = self.align_exponent(self, other)
        return self.from_parts(self_mantissa.subtract(other_mantissa), common)

    def multiply(self, other):
        other = type(self)(other)
        return self.from_parts(
            self._mantissa.multiply(other._mantissa),
            self._exponent + other._exponent,
        )

    def div(self, other, n=None):
        """
        self / other, truncated (not rounded) to n fractional digits.

        assert '3.33' == str(DecimalNumber(10).div(3, 2))

        Dividing by zero, or asking for negative digits, fails a check().
        """
        if n is None:
            n = self.DEFAULT_PRECISION
        other = type(self)(other)
        check(not other.is_zero(), "division by zero in DecimalNumber")
        check(n >= 0, "negative precision in DecimalNumber.div")
        _, self_mantissa, other_mantissa = self.align_exponent(self, other)
        quotient = self_mantissa.multiply(BigInteger.power_of_ten(n)).divide(other_mantissa)
        return self.from_parts(quotient, -n)

    def div_round(self, other, n=None):
        """
        self / other, rounded half up to n fractional digits.

        Divides out to n+1 digits, then that last digit decides.
        5 or more carries 1 into the kept digits, all the way into the whole part if need be.
        Half up is in magnitude, so -0.35 rounds to -0.4.

        assert '10' == str(DecimalNumber('9.96').div_round(1, 1))
        """
        if n is None:
            n = self.DEFAULT_PRECISION
        other = type(self)(other)
        check(not other.is_zero(), "division by zero in DecimalNumber.div_round")
        check(n >= 0, "negative precision in DecimalNumber.div_round")
        _, self_mantissa, other_mantissa = self.align_exponent(self, other)
        extended = self_mantissa.multiply(BigInteger.power_of_ten(n + 1)).divide(other_mantissa)
        kept, dropped = extended.divide_modulo(TEN)
        if dropped.abs().compare(FIVE) >= 0:
            kept = kept.subtract(ONE) if extended.is_negative() else kept.add(ONE)
        return self.from_parts(kept, -n)

    def power(self, exponent):
        """
        self ** exponent, for a whole, non-negative exponent.  Returns a Result.

        assert DecimalNumber('3.375') == DecimalNumber('1.5').power(3).value

        The new decimal exponent must fit in 32 signed bits, else an error Result.
        """
        exponent = BigInteger(exponent)
        if exponent.is_negative():
            return Result.err("negative exponent not supported")
        if exponent.is_zero():
            return Result.ok(type(self)(1))

        new_exponent = BigInteger(self._exponent).multiply(exponent)
        if new_exponent.compare(self.EXPONENT_MAX) > 0 or new_exponent.compare(self.EXPONENT_MIN) < 0:
            return Result.err("exponent overflow in DecimalNumber.power")

        magnitude = self._mantissa.abs().power(exponent)
        if magnitude.is_err():
            return Result.err(magnitude.error)
        mantissa = magnitude.value
        if self._mantissa.is_negative() and not exponent.modulo(2).is_zero():
            mantissa = mantissa.negate()
        return new_exponent.to_int64().map(lambda e: self.from_parts(mantissa, e))

    def decimal_weekeq(self, other, n):
        """
        Do these agree to n fractional digits?  Truncated, not rounded.

        assert DecimalNumber('1.2345').decimal_weekeq(DecimalNumber('1.2346'), 3)
        assert not DecimalNumber('1.2345').decimal_weekeq(DecimalNumber('1.2346'), 4)
        """
        if n < 0:
            return False
        other = type(self)(other)
        if self == other:
            return True
        self_whole = self.integer_part()
        other_whole = other.integer_part()
        if self_whole != other_whole:
            return False
        scale = type(self)(BigInteger.power_of_ten(n))
        self_scaled = self.subtract(self_whole).multiply(scale).integer_part()
        other_scaled = other.subtract(other_whole).multiply(scale).integer_part()
        return self_scaled == other_scaled

    def _power_value(self, exponent):
        """For the ** operator, which has nowhere to put an error but an exception."""
        return self.power(exponent).value

    @classmethod
    def _operand(cls, x):
        """Operand-ready version of x, or None if DecimalNumber math can't handle it."""
        if isinstance(x, DecimalNumber):
            return x
        elif isinstance(x, (BigInteger, int)):
            return cls(x)
        else:
            return None

    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        """Two-input operator, mixing freely with BigInteger and int."""
        left = cls._operand(input_left)
        right = cls._operand(input_right)
        if left is None or right is None:
            return NotImplemented
        return method(left, right)

    def __pos__(self): return self
    def __neg__(self): return self.negate()
    def __abs__(self): return self.abs()

    def __add__(self, other): return self._binary_op(DecimalNumber.add, self, other)
    def __radd__(self, other): return self._binary_op(DecimalNumber.add, other, self)
    def __sub__(self, other): return self._binary_op(DecimalNumber.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(DecimalNumber.subtract, other, self)
    def __mul__(self, other): return self._binary_op(DecimalNumber.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(DecimalNumber.multiply, other, self)
    def __truediv__(self, other): return self._binary_op(DecimalNumber.div, self, other)
    def __rtruediv__(self, other): return self._binary_op(DecimalNumber.div, other, self)

    def __pow__(self, other):
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self._power_value(other)

    # "to" conversions:  DecimalNumber --> other type
    # ------------------------------------------------
    def __int__(self):
        """Truncates toward zero, like int(float)."""
        return int(self.integer_part())

    def __float__(self):
        """Lossy, best effort."""
        return float(self.to_string())

    def __bool__(self):
        return not self.is_zero()


def _digit_count(big_integer):
    """Decimal digits in the magnitude, from the limbs, without formatting them all."""
    limbs = big_integer.limbs
    return (len(limbs) - 1) * DIGITS_PER_LIMB + len(str(limbs[-1]))


def _find_exponent_marker(text):
    """Index of the first e or E, or None."""
    for index, character in enumerate(text):
        if character in 'eE':
            return index
    return None


ONE = BigInteger(1)
FIVE = BigInteger(5)
TEN = BigInteger(10)
