"""
Fatal precondition checks.

A failed check is programmer error, not bad input.  Bad input flows back to the
caller as a Result.  A failed check raises CheckError, which is deliberately NOT
an Exception subclass, so a routine

    try:
        ...
    except Exception:
        ...

never swallows it.  Uncaught, it ends the program with the diagnostic.

    check(not divisor.is_zero(), "division by zero")
"""


class CheckError(BaseException):
    """e.g. BigInteger(1) // BigInteger(0)"""


def check(condition, message):
    """Abort with a diagnostic unless condition holds."""
    if not condition:
        raise CheckError("check failed:  {}".format(message))
