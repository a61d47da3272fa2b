"""
bignum - Integers and decimal fractions of any size.

Usage example:

    from bignum import BigInteger, DecimalNumber

    assert '1267650600228229401496703205376' == str(BigInteger(2) ** 100)
    assert '3.3333333333' == str(DecimalNumber(10) / DecimalNumber(3))
    assert '0.001' == str(DecimalNumber('1e-3'))

Text that might not parse comes back as a Result:

    r = BigInteger.from_string(user_input)
    if r.is_err():
        print("Not a number:", r.error)
"""


from .big_integer import BigInteger
from .check import check
from .check import CheckError
from .decimal_number import DecimalNumber
from .json_encode import json_decode
from .json_encode import json_encode
from .result import Result

__all__ = [
    'BigInteger',
    'check',
    'CheckError',
    'DecimalNumber',
    'json_decode',
    'json_encode',
    'Result',
]

from . import version
__version__ = version.__doc__
