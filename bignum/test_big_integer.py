"""
Testing bignum big_integer.py
"""

import operator
import pickle
import random
import unittest

from bignum.big_integer import BigInteger, INT64_MAX, INT64_MIN, UINT64_MAX
from bignum.check import CheckError
from bignum.result import Result


def truncated_divmod(a, b):
    """What C does, and Python's // does not:  round the quotient toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class BigIntegerConstructorTests(unittest.TestCase):

    def test_default_is_zero(self):
        self.assertEqual('0', str(BigInteger()))
        self.assertTrue(BigInteger().is_zero())

    def test_from_int(self):
        self.assertEqual('42', str(BigInteger(42)))
        self.assertEqual('-42', str(BigInteger(-42)))
        self.assertEqual(str(2 ** 200), str(BigInteger(2 ** 200)))
        self.assertEqual(str(-2 ** 200), str(BigInteger(-2 ** 200)))

    def test_from_string(self):
        self.assertEqual(BigInteger(123), BigInteger('123'))
        self.assertEqual(BigInteger(-123), BigInteger('-123'))

    def test_copy(self):
        n = BigInteger('-98765432109876543210')
        self.assertEqual(n, BigInteger(n))

    def test_bad_type(self):
        with self.assertRaises(BigInteger.ConstructorTypeError):
            BigInteger(1.5)
        with self.assertRaises(BigInteger.ConstructorTypeError):
            BigInteger(None)
        with self.assertRaises(TypeError):
            BigInteger([1])

    def test_bad_string(self):
        with self.assertRaises(BigInteger.ConstructorValueError):
            BigInteger('12x')
        with self.assertRaises(ValueError):
            BigInteger('')

    def test_limbs(self):
        self.assertEqual((0,), BigInteger(0).limbs)
        self.assertEqual((0, 1), BigInteger(10 ** 9).limbs)
        self.assertEqual((789, 123456), BigInteger(-123456000000789).limbs)

    def test_no_negative_zero(self):
        self.assertFalse(BigInteger('-0').is_negative())
        self.assertFalse(BigInteger('-000').negative)
        self.assertFalse(BigInteger(5).subtract(5).is_negative())
        self.assertFalse(BigInteger(-5).multiply(0).is_negative())
        self.assertFalse(BigInteger(0).negate().is_negative())
        self.assertEqual('0', str(BigInteger(-3).modulo(3)))

    def test_power_of_ten(self):
        self.assertEqual(BigInteger(1), BigInteger.power_of_ten(0))
        self.assertEqual(BigInteger(10 ** 25), BigInteger.power_of_ten(25))


class BigIntegerStringTests(unittest.TestCase):

    def test_round_trip(self):
        for text in (
            '0',
            '1',
            '-1',
            '999999999',
            '1000000000',
            '-1000000001',
            '123456789012345678901234567890',
            '100000000000000000000000000000000000',
        ):
            self.assertEqual(text, BigInteger.from_string(text).value.to_string())

    def test_leading_zeros(self):
        self.assertEqual('123', BigInteger.from_string('000123').value.to_string())
        self.assertEqual('-123', BigInteger.from_string('-000123').value.to_string())
        self.assertEqual('0', BigInteger.from_string('0000000000000000000').value.to_string())

    def test_inner_limbs_padded(self):
        self.assertEqual('1000000001', str(BigInteger(1000000001)))
        self.assertEqual('5000000000000000007', str(BigInteger(5000000000000000007)))

    def test_errors(self):
        self.assertEqual(Result.err("empty string"), BigInteger.from_string(''))
        self.assertEqual(Result.err("missing digits after minus sign"), BigInteger.from_string('-'))
        self.assertEqual(Result.err("invalid digit"), BigInteger.from_string('12a3'))
        self.assertEqual(Result.err("invalid digit"), BigInteger.from_string('+5'))
        self.assertEqual(Result.err("invalid digit"), BigInteger.from_string(' 5'))
        self.assertEqual(Result.err("invalid digit"), BigInteger.from_string('--5'))
        self.assertEqual(Result.err("invalid digit"), BigInteger.from_string('1234567890123x'))

    def test_repr(self):
        self.assertEqual("BigInteger('-7')", repr(BigInteger(-7)))


class BigIntegerCompareTests(unittest.TestCase):

    def test_compare(self):
        self.assertEqual(0, BigInteger(5).compare(BigInteger(5)))
        self.assertEqual(-1, BigInteger(-5).compare(BigInteger(5)))
        self.assertEqual(1, BigInteger(5).compare(BigInteger(-5)))
        self.assertEqual(-1, BigInteger(-6).compare(BigInteger(-5)))
        self.assertEqual(1, BigInteger(10 ** 9).compare(BigInteger(999999999)))
        self.assertEqual(-1, BigInteger(-10 ** 9).compare(BigInteger(-999999999)))

    def test_operators(self):
        self.assertTrue(BigInteger(1) < BigInteger(2))
        self.assertTrue(BigInteger(2) <= BigInteger(2))
        self.assertTrue(BigInteger(3) > 2)
        self.assertTrue(3 >= BigInteger(3))
        self.assertTrue(BigInteger(3) == 3)
        self.assertTrue(BigInteger(3) != BigInteger(-3))
        self.assertFalse(BigInteger(3) == '3')

    def test_hash(self):
        self.assertEqual(hash(12345678901234567890), hash(BigInteger(12345678901234567890)))
        self.assertEqual(1, len({BigInteger(7), BigInteger('7'), 7}))

    def test_sort(self):
        numbers = [BigInteger(x) for x in (10 ** 20, -1, 0, -10 ** 20, 1)]
        self.assertEqual(
            ['-100000000000000000000', '-1', '0', '1', '100000000000000000000'],
            [str(n) for n in sorted(numbers)],
        )


class BigIntegerArithmeticTests(unittest.TestCase):

    def test_add(self):
        self.assertEqual(
            BigInteger('100000000000000000000'),
            BigInteger('99999999999999999999') + BigInteger('1'),
        )
        self.assertEqual(BigInteger('1000000000'), BigInteger('999999999').add(BigInteger(1)))
        self.assertEqual(BigInteger(-2), BigInteger(3).add(BigInteger(-5)))
        self.assertEqual(BigInteger(2), BigInteger(-3).add(BigInteger(5)))
        self.assertEqual(BigInteger(-8), BigInteger(-3) + -5)

    def test_subtract(self):
        self.assertEqual(BigInteger(999999999), BigInteger(10 ** 9) - 1)
        self.assertEqual(BigInteger(-1), BigInteger(0) - 1)
        self.assertEqual(BigInteger(8), 5 - BigInteger(-3))

    def test_multiply(self):
        self.assertEqual(BigInteger('121932631112635269'), BigInteger('123456789') * BigInteger('987654321'))
        self.assertEqual(BigInteger(-6), BigInteger(2) * -3)
        self.assertEqual(BigInteger(6), BigInteger(-2) * BigInteger(-3))
        self.assertEqual(
            BigInteger('121932631137021795226185032733622923332237463801111263526900'),
            BigInteger('123456789012345678901234567890') * BigInteger('987654321098765432109876543210'),
        )

    def test_divide(self):
        self.assertEqual(BigInteger(333), BigInteger(1000).divide(BigInteger(3)))
        self.assertEqual(BigInteger(3), BigInteger(7).divide(BigInteger(2)))
        self.assertEqual(BigInteger(1), BigInteger(1000).modulo(BigInteger(3)))

    def test_divide_truncates_toward_zero(self):
        self.assertEqual((BigInteger(-3), BigInteger(-1)), BigInteger(-7).divide_modulo(2))
        self.assertEqual((BigInteger(-3), BigInteger(1)), BigInteger(7).divide_modulo(-2))
        self.assertEqual((BigInteger(3), BigInteger(-1)), BigInteger(-7).divide_modulo(-2))
        self.assertEqual((BigInteger(-2), BigInteger(-1)), BigInteger(-7).divide_modulo(3))
        self.assertEqual(BigInteger(-3), BigInteger(-7) // 2)
        self.assertEqual(BigInteger(-1), BigInteger(-7) % 2)

    def test_divmod_operator(self):
        self.assertEqual((BigInteger(333), BigInteger(1)), divmod(BigInteger(1000), 3))
        self.assertEqual((BigInteger(3), BigInteger(1)), divmod(1000, BigInteger(333)))

    def test_divide_by_zero_is_fatal(self):
        with self.assertRaises(CheckError):
            BigInteger(1).divide(BigInteger(0))
        with self.assertRaises(CheckError):
            BigInteger(1) % 0

    def test_divide_by_zero_is_not_an_exception(self):
        """An except Exception clause does not catch a failed check."""
        self.assertFalse(issubclass(CheckError, Exception))
        with self.assertRaises(CheckError):
            try:
                BigInteger(10 ** 30).divide_modulo(0)
            except Exception:
                self.fail("CheckError caught as an Exception")

    def test_division_law_random(self):
        rng = random.Random(7)
        for _ in range(300):
            a = rng.randrange(-10 ** rng.randrange(1, 60), 10 ** rng.randrange(1, 60))
            b = rng.randrange(-10 ** rng.randrange(1, 30), 10 ** rng.randrange(1, 30))
            if b == 0:
                continue
            expected_quotient, expected_remainder = truncated_divmod(a, b)
            quotient, remainder = BigInteger(a).divide_modulo(BigInteger(b))
            self.assertEqual(expected_quotient, int(quotient), "{} / {}".format(a, b))
            self.assertEqual(expected_remainder, int(remainder), "{} % {}".format(a, b))
            self.assertEqual(BigInteger(a), quotient * b + remainder)
            self.assertTrue(remainder.abs() < BigInteger(b).abs())

    def test_arithmetic_random(self):
        rng = random.Random(11)
        for _ in range(200):
            a = rng.randrange(-10 ** 45, 10 ** 45)
            b = rng.randrange(-10 ** 30, 10 ** 30)
            self.assertEqual(a + b, int(BigInteger(a) + BigInteger(b)))
            self.assertEqual(a - b, int(BigInteger(a) - BigInteger(b)))
            self.assertEqual(a * b, int(BigInteger(a) * BigInteger(b)))

    def test_commutative_associative(self):
        rng = random.Random(3)
        for _ in range(50):
            a, b, c = (BigInteger(rng.randrange(-10 ** 40, 10 ** 40)) for _ in range(3))
            self.assertEqual(a + b, b + a)
            self.assertEqual((a + b) + c, a + (b + c))
            self.assertEqual(a * b, b * a)
            self.assertEqual((a * b) * c, a * (b * c))

    def test_power(self):
        self.assertEqual(Result.ok(BigInteger(1024)), BigInteger(2).power(10))
        self.assertEqual(Result.ok(BigInteger(-8)), BigInteger(-2).power(3))
        self.assertEqual(Result.ok(BigInteger(16)), BigInteger(-2).power(4))
        self.assertEqual(Result.ok(BigInteger(1)), BigInteger(0).power(0))
        self.assertEqual(Result.ok(BigInteger(0)), BigInteger(0).power(5))
        self.assertEqual(Result.ok(BigInteger(3 ** 100)), BigInteger(3).power(BigInteger(100)))
        self.assertEqual(Result.err("exponent cannot be negative"), BigInteger(2).power(-1))

    def test_power_operator(self):
        self.assertEqual(BigInteger(2 ** 100), BigInteger(2) ** 100)
        self.assertEqual(BigInteger(2 ** 100), 2 ** BigInteger(100))
        with self.assertRaises(Result.UnwrapError):
            BigInteger(2) ** -1

    def test_sign_abs_negate(self):
        self.assertEqual(-1, BigInteger(-5).sign())
        self.assertEqual(0, BigInteger(0).sign())
        self.assertEqual(1, BigInteger(5).sign())
        self.assertEqual(BigInteger(5), BigInteger(-5).abs())
        self.assertEqual(BigInteger(5), abs(BigInteger(-5)))
        self.assertEqual(BigInteger(-5), -BigInteger(5))
        self.assertEqual(BigInteger(5), +BigInteger(5))

    def test_shift_left(self):
        self.assertEqual(BigInteger(-7 * 10 ** 18), BigInteger(-7).shift_left(2))

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            BigInteger(1) + 1.5
        with self.assertRaises(TypeError):
            BigInteger(1) * 'x'

    def test_does_not_change_operands(self):
        a = BigInteger('123456789012345678901234567890')
        b = BigInteger('987654321')
        for op in (operator.add, operator.sub, operator.mul, operator.floordiv, operator.mod):
            op(a, b)
        self.assertEqual('123456789012345678901234567890', str(a))
        self.assertEqual('987654321', str(b))


class BigIntegerConversionTests(unittest.TestCase):

    def test_int(self):
        self.assertEqual(-10 ** 30, int(BigInteger(-10 ** 30)))

    def test_float(self):
        self.assertEqual(1.5e20, float(BigInteger(150000000000000000000)))
        self.assertEqual(-2.0, float(BigInteger(-2)))

    def test_bool(self):
        self.assertFalse(BigInteger(0))
        self.assertTrue(BigInteger(-1))

    def test_to_uint64(self):
        self.assertEqual(Result.ok(UINT64_MAX), BigInteger('18446744073709551615').to_uint64())
        self.assertEqual(Result.ok(0), BigInteger(0).to_uint64())
        self.assertEqual(Result.err("value exceeds uint64 max"), BigInteger('18446744073709551616').to_uint64())
        self.assertEqual(Result.err("negative value cannot be converted to uint64"), BigInteger(-1).to_uint64())

    def test_to_int64(self):
        self.assertEqual(Result.ok(INT64_MAX), BigInteger(2 ** 63 - 1).to_int64())
        self.assertEqual(Result.ok(INT64_MIN), BigInteger(-2 ** 63).to_int64())
        self.assertEqual(Result.ok(-5), BigInteger(-5).to_int64())
        self.assertEqual(Result.err("value exceeds int64 max"), BigInteger(2 ** 63).to_int64())
        self.assertEqual(Result.err("value exceeds int64 range"), BigInteger(-2 ** 63 - 1).to_int64())

    def test_div_to_float(self):
        self.assertEqual(Result.ok(2.5), BigInteger(5).div_to_float(BigInteger(2)))
        self.assertEqual(Result.ok(-0.5), BigInteger(-1).div_to_float(2))
        self.assertEqual(Result.err("division by zero in div_to_float"), BigInteger(5).div_to_float(0))

    def test_pickle(self):
        for n in (BigInteger(0), BigInteger(-1), BigInteger(10 ** 50 + 1)):
            self.assertEqual(n, pickle.loads(pickle.dumps(n)))

    def test_to_json(self):
        self.assertEqual(10 ** 30, BigInteger(10 ** 30).to_json())


if __name__ == '__main__':
    unittest.main()
