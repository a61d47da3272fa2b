"""
JSON in and out, without ever passing through a float.

    assert '[123,"0.5"]' == json_encode([BigInteger(123), DecimalNumber('0.5')])
    assert [BigInteger(123), DecimalNumber('0.5')] == json_decode('[123, 0.5]')

BigIntegers encode as JSON numbers, any number of digits.
DecimalNumbers encode as strings, because most JSON readers turn numbers with a point into doubles.
"""

import json
import json.encoder

from .big_integer import BigInteger
from .decimal_number import DecimalNumber


class JsonNumberEncoder(json.JSONEncoder):
    """
    Converter for json_encode().

    BigInteger digits go straight into the output, from BigInteger.to_string().
    They never become a Python int on the way, because on Python 3.11 and up
    str(int) refuses more than 4300 digits.
    SEE:  https://docs.python.org/3/library/stdtypes.html#int-max-str-digits

    Anything else with a .to_json() method, e.g. DecimalNumber, gets that.
    """

    def default(self, x):
        if hasattr(x, 'to_json') and callable(x.to_json):
            return x.to_json()
        else:
            return super(JsonNumberEncoder, self).default(x)
            # NOTE:  Raises a TypeError.

    def iterencode(self, o, _one_shot=False):
        """
        JSONEncoder.iterencode() with BigInteger treated as one more kind of int.

        Always the pure-Python encoder.  The C accelerator has no hook for number text.
        """
        if self.check_circular:
            markers = {}
        else:
            markers = None
        if self.ensure_ascii:
            string_encoder = json.encoder.encode_basestring_ascii
        else:
            string_encoder = json.encoder.encode_basestring

        def float_text(f, allow_nan=self.allow_nan):
            if f != f:
                text = 'NaN'
            elif f == json.encoder.INFINITY:
                text = 'Infinity'
            elif f == -json.encoder.INFINITY:
                text = '-Infinity'
            else:
                return float.__repr__(f)
            if not allow_nan:
                raise ValueError("Out of range float values are not JSON compliant: {!r}".format(f))
            return text

        iterencode_anything = json.encoder._make_iterencode(
            markers,
            self.default,
            string_encoder,
            self.indent,
            float_text,
            self.key_separator,
            self.item_separator,
            self.sort_keys,
            self.skipkeys,
            _one_shot,
            int=(int, BigInteger),
            _intstr=integer_text,
        )
        return iterencode_anything(o, 0)


def integer_text(i):
    """JSON number text for an int or a BigInteger."""
    if isinstance(i, BigInteger):
        return i.to_string()
    else:
        return int.__repr__(i)


JSON_SEPARATORS_NO_SPACES = (',', ':')


def json_encode(x, **kwargs):
    """
    JSON encode, with BigInteger and DecimalNumber anywhere inside x.

    A BigInteger dictionary key becomes a string of its digits, like an int key would.
    """
    return json.dumps(
        x,
        cls=JsonNumberEncoder,
        separators=JSON_SEPARATORS_NO_SPACES,
        allow_nan=False,
        **kwargs
    )


def json_decode(text, **kwargs):
    """
    JSON decode, reading integers as BigInteger and other numbers as DecimalNumber.

    The number text goes straight to the constructors, so no digit limit applies here either.
    Strings stay strings, even ones that json_encode() made out of a DecimalNumber.
    """
    return json.loads(
        text,
        parse_int=BigInteger,
        parse_float=DecimalNumber,
        **kwargs
    )
