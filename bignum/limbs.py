"""
Unsigned magnitudes as lists of base 10**9 limbs, least significant limb first.

    assert [789, 123456] == from_int(123456000000789)

Every function here treats its inputs as read-only and returns a fresh, trimmed list.
A trimmed list is never empty and has no most-significant zero limb, except [0] for zero.
Signs are not the business of this module.  See BigInteger for those.

Why 10**9?  Two limbs multiplied stay under 10**18, inside a 64-bit word,
and each limb is exactly 9 decimal digits, so formatting is limb-aligned.
"""

from .check import check


BASE = 1000000000
DIGITS_PER_LIMB = 9
assert BASE == 10 ** DIGITS_PER_LIMB


def trim(limbs):
    """Drop most-significant zero limbs, in place, leaving at least one.  Returns the list."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero(limbs):
    return len(limbs) == 1 and limbs[0] == 0


def from_int(i):
    """Limbs of a non-negative Python int."""
    assert i >= 0
    limbs = []
    while i > 0:
        i, limb = divmod(i, BASE)
        limbs.append(limb)
    return trim(limbs)


def to_int(limbs):
    """Python int of a magnitude."""
    i = 0
    for limb in reversed(limbs):
        i = i * BASE + limb
    return i


# Comparison
# ----------
def compare(a, b):
    """
    -1, 0, or +1 as magnitude a is less than, equal to, or greater than b.

    No leading zero limbs, so the longer one is bigger.  Ties compare from the top down.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def abs_less(a, b):
    return compare(a, b) < 0


# Arithmetic
# ----------
def add(a, b):
    """a + b"""
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, limb = divmod(total, BASE)
        result.append(limb)
    result.append(carry)
    return trim(result)


def subtract(a, b):
    """a - b, where a >= b.  The caller makes sure of that."""
    result = []
    borrow = 0
    for i in range(len(a)):
        difference = a[i] - borrow
        if i < len(b):
            difference -= b[i]
        if difference < 0:
            difference += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(difference)
    assert borrow == 0, "subtract() needs a >= b"
    return trim(result)


def multiply(a, b):
    """a * b, schoolbook style.  O(len(a) * len(b))"""
    result = [0] * (len(a) + len(b))
    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue
        carry = 0
        for j, b_limb in enumerate(b):
            carry, result[i + j] = divmod(a_limb * b_limb + result[i + j] + carry, BASE)
        result[i + len(b)] = carry
        # NOTE:  Each row's final carry lands on a limb no earlier row has touched.
    return trim(result)


def multiply_small(a, d):
    """a * d, for a single-limb d, 0 <= d < BASE"""
    assert 0 <= d < BASE
    result = []
    carry = 0
    for limb in a:
        carry, low = divmod(limb * d + carry, BASE)
        result.append(low)
    result.append(carry)
    return trim(result)


def divmod_small(a, d):
    """(a // d, a % d) for a single-limb d, 0 < d < BASE.  The remainder is an int."""
    assert 0 < d < BASE
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * BASE + a[i], d)
    return trim(quotient), remainder


def shift_left(a, k):
    """a * BASE**k, by prepending k zero limbs."""
    assert k >= 0
    if k == 0 or is_zero(a):
        return list(a)
    return [0] * k + list(a)


def power_of_ten(k):
    """
    Limbs of 10**k.

    assert [0, 0, 1000] == power_of_ten(21)
    """
    assert k >= 0
    whole_limbs, leftover_digits = divmod(k, DIGITS_PER_LIMB)
    return shift_left([10 ** leftover_digits], whole_limbs)


def divide_modulo(a, b):
    """
    Long division of magnitudes:  (quotient, remainder) as two limb lists.

    Knuth's Algorithm D.
    SEE:  The Art of Computer Programming, Vol. 2, section 4.3.1

    1.  Normalize.  Scale dividend and divisor by d = BASE // (top divisor limb + 1).
        The quotient is unchanged, but now the top divisor limb is >= BASE/2,
        which keeps each trial quotient digit at most 2 too big.
    2.  For each quotient position, most significant first:
        a.  Guess q_hat from the top two remainder limbs over the top divisor limb.
        b.  Knock q_hat down using the second divisor limb.  Now it's at most 1 too big.
        c.  Subtract q_hat * divisor from the remainder window.
        d.  If that went negative, q_hat was 1 too big.  Decrement it, add the divisor back.
    3.  Unnormalize.  The remainder is still scaled by d, so divide it back down.

    Division by zero is a programmer error.
    """
    check(not is_zero(b), "division by zero in divide_modulo")
    if abs_less(a, b):
        return [0], list(a)
    n = len(b)
    if n == 1:
        quotient, remainder = divmod_small(a, b[0])
        return quotient, [remainder]

    d = BASE // (b[-1] + 1)
    u = multiply_small(a, d)
    u.extend([0] * (len(a) + 1 - len(u)))
    v = multiply_small(b, d)
    assert len(v) == n and v[-1] >= BASE // 2, "Normalization failed:  {!r}".format(v)
    v_top = v[-1]
    v_next = v[-2]

    m = len(a) - n
    quotient = [0] * (m + 1)
    for j in range(m, -1, -1):
        numerator = u[j + n] * BASE + u[j + n - 1]
        if u[j + n] >= v_top:
            q_hat = BASE - 1
        else:
            q_hat = numerator // v_top
        r_hat = numerator - q_hat * v_top
        while r_hat < BASE and q_hat * v_next > r_hat * BASE + u[j + n - 2]:
            q_hat -= 1
            r_hat += v_top

        carry = 0
        borrow = 0
        for i in range(n):
            carry, product = divmod(q_hat * v[i] + carry, BASE)
            difference = u[j + i] - product - borrow
            if difference < 0:
                u[j + i] = difference + BASE
                borrow = 1
            else:
                u[j + i] = difference
                borrow = 0
        difference = u[j + n] - carry - borrow

        if difference < 0:
            u[j + n] = difference + BASE
            q_hat -= 1
            carry = 0
            for i in range(n):
                carry, u[j + i] = divmod(u[j + i] + v[i] + carry, BASE)
            u[j + n] = (u[j + n] + carry) % BASE
            # NOTE:  The carry out of the top cancels the borrow that got us here.
        else:
            u[j + n] = difference

        quotient[j] = q_hat

    remainder, leftover = divmod_small(trim(u[:n]), d)
    assert leftover == 0, "Unnormalizing the remainder left {}".format(leftover)
    return trim(quotient), remainder
