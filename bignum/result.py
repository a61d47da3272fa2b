"""
Result - the outcome of something that might not work:  either a value or an error.

    r = BigInteger.from_string("123")
    if r.is_ok():
        n = r.value
    else:
        print("Bad number:", r.error)

Parsers, power, and the range-limited conversions return a Result instead of raising,
because malformed text or an out-of-range value is an everyday outcome, not a bug.
"""


class Result(object):
    """
    Two variants:  Result.ok(value) or Result.err(error).

    The error is usually a short human-readable string, e.g. "invalid digit".
    Check the variant before reading .value -- reading the value of an error raises
    Result.UnwrapError, and so does reading the error of a success.
    """
    __slots__ = ('_is_ok', '_value', '_error')

    def __init__(self, is_ok, value=None, error=None):
        self._is_ok = bool(is_ok)
        self._value = value
        self._error = error

    class UnwrapError(ValueError):
        """e.g. Result.err("oops").value or Result.ok(1).error"""

    @classmethod
    def ok(cls, value=None):
        return cls(True, value=value)

    @classmethod
    def err(cls, error):
        return cls(False, error=error)

    def is_ok(self):
        return self._is_ok

    def is_err(self):
        return not self._is_ok

    @property
    def value(self):
        """The success value.  Raises UnwrapError if this is an error."""
        if not self._is_ok:
            raise self.UnwrapError("Called value on an error Result:  {}".format(self._error))
        return self._value

    @property
    def error(self):
        """The error.  Raises UnwrapError if this is a success."""
        if self._is_ok:
            raise self.UnwrapError("Called error on a success Result:  {!r}".format(self._value))
        return self._error

    def value_or(self, default):
        """The value if ok, otherwise the default."""
        return self._value if self._is_ok else default

    def map(self, f):
        """
        Transform the value, pass the error through.

        assert Result.ok(3) == Result.ok(2).map(lambda x: x + 1)
        """
        if self._is_ok:
            return type(self).ok(f(self._value))
        else:
            return self

    def map_err(self, f):
        """Transform the error, pass the value through."""
        if self._is_ok:
            return self
        else:
            return type(self).err(f(self._error))

    def and_then(self, f):
        """
        Chain another fallible step.  f takes the value and returns a Result.

        assert Result.err("no") == Result.err("no").and_then(anything)
        """
        if self._is_ok:
            return f(self._value)
        else:
            return self

    def or_else(self, f):
        """Call f(error) for its side effect if this is an error.  Return self either way."""
        if not self._is_ok:
            f(self._error)
        return self

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        if self._is_ok != other._is_ok:
            return False
        if self._is_ok:
            return self._value == other._value
        else:
            return self._error == other._error

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    __hash__ = None

    def __repr__(self):
        if self._is_ok:
            return "Result.ok({!r})".format(self._value)
        else:
            return "Result.err({!r})".format(self._error)
