#!/usr/bin/env python
# -*- coding: utf-8 -*-

import itertools
import logging

import numpy as np

from pynat.base import (
    DECIMAL_GROUP, DECIMAL_GROUP_WIDTH, DIGIT_BITS, DIGIT_MASK, FIXED31_MASK, FIXED64_MASK,
    compare_ints, digit_bit_index, split_wide, trim_digits,
)
from pynat.errors import DivisionByZero, InvalidArgument, NegativeValue, Underflow, Unsupported
from pynat.flowint import FlowInt, UFlow32


def _is_int(o):
    return isinstance(o, (int, np.integer)) and not isinstance(o, bool)


def _digit_value(d):
    '''
    Plain int value of a single digit, validated to fit in 32 unsigned bits.
    '''
    if isinstance(d, FlowInt):
        v = d.num
    elif _is_int(d):
        v = int(d)
    else:
        raise InvalidArgument(f"Digit {d!r} is not an integer")
    if v < 0:
        raise NegativeValue(f"Negative digit {v} not allowed")
    if v > DIGIT_MASK:
        raise InvalidArgument(f"Digit {v} out-of-range for unsigned {DIGIT_BITS} bits")
    return v


class Natural():
    '''
    Arbitrary-precision unsigned integer, stored as an immutable chain of 32-bit
    digits, least-significant first. The most-significant digit is the chain's
    "end", every other digit is followed by a more significant tail.

    Only construction builds a Natural, every operation returns a new one and
    never touches its operands, so tails may be shared freely. Chains with
    most-significant zero digits are allowed ("non-canonical") and still compare
    and calculate correctly; call trim() to get the minimal chain.
    '''

    __slots__ = ('_digits',)

    def __init__(self, *digits):
        '''
        Build a Natural from explicit digits, most-significant first, i.e. the way
        a number is written down.
        :param digits: One or more ints (or UFlow32) each in [0, 2**32)
        '''
        if not digits:
            raise InvalidArgument("A Natural needs at least one digit")
        self._digits = tuple(_digit_value(d) for d in reversed(digits))

    @classmethod
    def _of(cls, digits):
        # trusted, least-significant-first digits
        n = cls.__new__(cls)
        n._digits = tuple(digits)
        return n

    @classmethod
    def from_fixed64(cls, num):
        '''
        Natural from a non-negative integer that fits in 64 bits, one or two digits.
        '''
        num = int(num)
        if num < 0:
            raise NegativeValue(f"Negative numbers not allowed: {num}")
        if num > FIXED64_MASK:
            raise InvalidArgument(f"Value {num} out-of-range for unsigned 64 bits")
        if num <= DIGIT_MASK:
            return cls._of((num,))
        return cls._of(split_wide(num))

    @classmethod
    def from_int(cls, num):
        '''
        Natural from an arbitrary-precision, non-negative Python int, by peeling
        off 32-bit chunks until the remainder fits in a single digit.
        '''
        if not _is_int(num):
            raise InvalidArgument(f"Cannot build a Natural from {num!r}")
        num = int(num)
        if num < 0:
            raise NegativeValue(f"Negative numbers not allowed: {num}")
        digits = []
        while num > DIGIT_MASK:
            digits.append(num & DIGIT_MASK)
            num >>= DIGIT_BITS
        digits.append(num)
        return cls._of(digits)

    @classmethod
    def from_array(cls, arr):
        '''
        Natural from a one-dimensional numpy array of digits, least-significant first,
        e.g. the output of to_array().
        '''
        arr = np.asarray(arr)
        if arr.ndim != 1 or arr.size == 0:
            raise InvalidArgument(f"Expected a non-empty 1-d digit array, got shape {arr.shape}")
        if arr.dtype.kind not in 'ui':
            raise InvalidArgument(f"Expected an integer digit array, got {arr.dtype}")
        if (arr < 0).any():
            raise NegativeValue("Negative digits not allowed")
        if (arr > DIGIT_MASK).any():
            raise InvalidArgument(f"Digits out-of-range for unsigned {DIGIT_BITS} bits")
        return cls._of(int(d) for d in arr.tolist())

    def to_array(self):
        '''
        Digits as a numpy uint32 array, least-significant first.
        '''
        return np.array(self._digits, dtype=np.uint32)

    '''
    Shape of the chain: an end node holds the most-significant digit, every other
    node holds a digit and a more significant tail.
    '''
    @property
    def is_end(self):
        return len(self._digits) == 1

    @property
    def digit(self):
        return UFlow32(self._digits[0])

    @property
    def tail(self):
        if self.is_end:
            return None
        return Natural._of(self._digits[1:])

    def __len__(self):
        return len(self._digits)

    def to_list(self):
        '''
        Digits as UFlow32, most-significant first.
        '''
        return [UFlow32(d) for d in reversed(self._digits)]

    def reversed(self):
        return Natural._of(self._digits[::-1])

    def chop(self, n):
        '''
        Drop the n least-significant digits, leaving zero if nothing remains.
        '''
        if n <= 0:
            return self
        if n >= len(self._digits):
            return Natural._of((0,))
        return Natural._of(self._digits[n:])

    def trim(self):
        '''
        Minimal chain for this value, without most-significant zero digits.
        '''
        digits = trim_digits(self._digits)
        if len(digits) == len(self._digits):
            return self
        return Natural._of(digits)

    def is_zero(self):
        return not any(self._digits)

    def to_fixed32(self):
        '''
        Least-significant digit with the top bit masked off, i.e. a non-negative
        signed 32-bit value. Truncates anything bigger.
        '''
        return self._digits[0] & FIXED31_MASK

    def to_fixed64(self):
        '''
        The two least-significant digits as an unsigned 64-bit value, silently
        dropping any more significant digits.
        '''
        if self.is_end:
            return self._digits[0]
        return (self._digits[1] << DIGIT_BITS) | self._digits[0]

    def to_big_integer(self):
        num = 0
        for d in reversed(self._digits):
            num = (num << DIGIT_BITS) | d
        return num

    def to_decimal_string(self):
        '''
        Decimal rendering, calculated nine digits at a time by repeated division by
        10**9. Every group but the most significant is zero-padded.
        '''
        groups = []
        n = self
        while not n.is_end:
            q, r = n.divmod_digit(DECIMAL_GROUP)
            if q.compare_digit(0) == 0:
                n = r
                break
            groups.append(f"{r._digits[0]:0{DECIMAL_GROUP_WIDTH}d}")
            n = q
        groups.append(str(n._digits[0]))
        return ''.join(reversed(groups))

    def __int__(self):
        return self.to_big_integer()

    def __bool__(self):
        return not self.is_zero()

    def __hash__(self):
        return hash(self.to_big_integer())

    def __str__(self):
        return self.to_decimal_string()

    def __repr__(self):
        return f"Natural({', '.join(str(d) for d in reversed(self._digits))})"

    def power_of_two(self):
        '''
        Zero-based index of the only set bit if this value is an exact power of two,
        else -1 (zero included).
        '''
        bit = -1
        for position, d in enumerate(self._digits):
            if d == 0:
                continue
            t = digit_bit_index(d)
            if t < 0 or bit >= 0:
                return -1
            bit = position * DIGIT_BITS + t
        return bit

    '''
    Ordering. A chain is compared from its least-significant digit up, carrying the
    verdict so far: a more significant difference always overrides it. The shorter
    chain is zero-extended.
    '''
    def compare_digit(self, d):
        d = _digit_value(d)
        if any(self._digits[1:]):
            return 1
        return compare_ints(self._digits[0], d)

    def compare(self, o):
        verdict = 0
        for a, b in itertools.zip_longest(self._digits, o._digits, fillvalue=0):
            verdict = compare_ints(a, b, verdict)
        return verdict

    def _cmp(self, o):
        if isinstance(o, Natural):
            return self.compare(o)
        if isinstance(o, FlowInt):
            return self.compare_digit(o)
        if _is_int(o):
            if o < 0:
                return 1
            return self.compare(Natural.from_int(o))
        return NotImplemented

    def __eq__(self, o):
        c = self._cmp(o)
        return c if c is NotImplemented else c == 0

    def __lt__(self, o):
        c = self._cmp(o)
        return c if c is NotImplemented else c < 0

    def __le__(self, o):
        c = self._cmp(o)
        return c if c is NotImplemented else c <= 0

    def __gt__(self, o):
        c = self._cmp(o)
        return c if c is NotImplemented else c > 0

    def __ge__(self, o):
        c = self._cmp(o)
        return c if c is NotImplemented else c >= 0

    '''
    Single-digit arithmetic. Each step works on a widened intermediate and splits it
    back into a digit and a carry (or borrow, or remainder).
    '''
    def add_digit(self, d):
        d = _digit_value(d)
        if d == 0:
            return self
        digits = list(self._digits)
        carry = d
        i = 0
        while carry and i < len(digits):
            digits[i], carry = split_wide(digits[i] + carry)
            i += 1
        if carry:
            digits.append(carry)
        return Natural._of(digits)

    def sub_digit(self, d):
        '''
        Subtract a digit, keeping the chain's length. Raises Underflow if the digit
        is bigger than the whole value.
        '''
        d = _digit_value(d)
        if d == 0:
            return self
        digits = list(self._digits)
        borrow = d
        i = 0
        while borrow and i < len(digits):
            digits[i], high = split_wide(digits[i] - borrow)
            borrow = -high
            i += 1
        if borrow:
            raise Underflow(f"Illegal subtraction: {self} - {d}")
        return Natural._of(digits)

    def mul_digit(self, d):
        d = _digit_value(d)
        if d == 0:
            return Natural._of((0,))
        elif d == 1:
            return self
        digits = []
        carry = 0
        for x in self._digits:
            low, carry = split_wide(x * d + carry)
            digits.append(low)
        if carry:
            digits.append(carry)
        return Natural._of(digits)

    def divmod_digit(self, d):
        '''
        Quotient and remainder by a single digit, by long division from the
        most-significant digit down. The quotient keeps the dividend's length, call
        trim() on it for the minimal chain. The remainder is a one-digit Natural.
        '''
        d = _digit_value(d)
        if d == 0:
            raise DivisionByZero(f"{self} divided by zero")
        elif d == 1:
            return self, Natural._of((0,))
        quotient = [0] * len(self._digits)
        rem = 0
        for i in reversed(range(len(self._digits))):
            quotient[i], rem = divmod((rem << DIGIT_BITS) + self._digits[i], d)
        return Natural._of(quotient), Natural._of((rem,))

    def div_digit(self, d):
        return self.divmod_digit(d)[0]

    def mod_digit(self, d):
        return self.divmod_digit(d)[1]

    '''
    Multi-digit arithmetic.
    '''
    def add(self, o):
        digits = []
        carry = 0
        for a, b in itertools.zip_longest(self._digits, o._digits, fillvalue=0):
            low, carry = split_wide(a + b + carry)
            digits.append(low)
        if carry:
            digits.append(carry)
        return Natural._of(digits)

    def sub(self, o):
        '''
        Difference of two Naturals, trimmed. Raises Underflow if o is bigger.
        '''
        digits = []
        borrow = 0
        for a, b in itertools.zip_longest(self._digits, o._digits, fillvalue=0):
            low, high = split_wide(a - b - borrow)
            digits.append(low)
            borrow = -high
        if borrow:
            raise Underflow(f"Illegal subtraction: {self} - {o}")
        return Natural._of(trim_digits(digits))

    def mul(self, o):
        '''
        Schoolbook product, quadratic in the number of digits. A single-digit
        operand on either side is handled as a single-digit multiplication.
        '''
        if self.is_end:
            return o.mul_digit(self._digits[0])
        elif o.is_end:
            return self.mul_digit(o._digits[0])
        lhs, rhs = self._digits, o._digits
        digits = [0] * (len(lhs) + len(rhs))
        for j, y in enumerate(rhs):
            if y == 0:
                continue
            carry = 0
            for i, x in enumerate(lhs):
                digits[i + j], carry = split_wide(digits[i + j] + x * y + carry)
            digits[j + len(lhs)] = carry
        return Natural._of(trim_digits(digits))

    def _divisor_shift(self, o):
        '''
        Bit index of a multi-digit divisor, which has to be an exact power of two.
        Only single-digit divisors and powers of two are supported, general long
        division is not.
        '''
        if o.compare_digit(1) < 0:
            raise DivisionByZero(f"{self} divided by zero")
        p = o.power_of_two()
        if p < 0:
            logging.debug(f"Rejecting multi-digit divisor {o!r}.")
            raise Unsupported(f"Cannot divide {self} by {o}, multi-digit divisors must be a power of two")
        logging.debug(f"Dividing by 2**{p} as a right shift.")
        return p

    def div(self, o):
        if o.is_end:
            return self.div_digit(o._digits[0])
        p = self._divisor_shift(o)
        if p == 0:
            return self
        return self.shift_right(p)

    def divmod(self, o):
        if o.is_end:
            return self.divmod_digit(o._digits[0])
        p = self._divisor_shift(o)
        if p == 0:
            return self, Natural._of((0,))
        q = self.shift_right(p)
        return q, self.sub(q.shift_left(p))

    def mod(self, o):
        return self.divmod(o)[1]

    '''
    Bit-level operations.
    '''
    def shift_left(self, n):
        n = int(n)
        if n < 0:
            raise InvalidArgument(f"Negative shift count {n}")
        m = n % DIGIT_BITS
        digits = [0] * (n // DIGIT_BITS)
        carry = 0
        for d in self._digits:
            low, carry = split_wide((d << m) | carry)
            digits.append(low)
        if carry:
            digits.append(carry)
        return Natural._of(digits)

    def shift_right(self, n):
        n = int(n)
        if n < 0:
            raise InvalidArgument(f"Negative shift count {n}")
        m = n % DIGIT_BITS
        low_mask = (1 << m) - 1
        chopped = self.chop(n // DIGIT_BITS)._digits
        digits = [0] * len(chopped)
        carry = 0
        for i in reversed(range(len(chopped))):
            d = chopped[i]
            digits[i] = (((carry << DIGIT_BITS) | d) >> m) & DIGIT_MASK
            carry = d & low_mask
        return Natural._of(digits)

    def bit_or(self, o):
        return Natural._of(
            a | b for a, b in itertools.zip_longest(self._digits, o._digits, fillvalue=0))

    def bit_and(self, o):
        '''
        Digit-wise AND. The result ends where the shorter operand ends: the longer
        operand's extra digits are dropped, not zero-extended. Trimmed.
        '''
        return Natural._of(trim_digits([a & b for a, b in zip(self._digits, o._digits)]))

    def bit_xor(self, o):
        return Natural._of(trim_digits(
            [a ^ b for a, b in itertools.zip_longest(self._digits, o._digits, fillvalue=0)]))

    '''
    Operators. A UFlow32 operand goes through the single-digit primitives, a Natural
    or a non-negative int through the multi-digit ones.
    '''
    @staticmethod
    def _natural(o):
        if isinstance(o, Natural):
            return o
        if isinstance(o, FlowInt):
            return Natural._of((_digit_value(o),))
        if _is_int(o):
            return Natural.from_int(o)
        return NotImplemented

    def __add__(self, o):
        if isinstance(o, FlowInt):
            return self.add_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.add(o)

    __radd__ = __add__

    def __sub__(self, o):
        if isinstance(o, FlowInt):
            return self.sub_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.sub(o)

    def __rsub__(self, o):
        o = self._natural(o)
        return o if o is NotImplemented else o.sub(self)

    def __mul__(self, o):
        if isinstance(o, FlowInt):
            return self.mul_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.mul(o)

    __rmul__ = __mul__

    def __floordiv__(self, o):
        if isinstance(o, FlowInt):
            return self.div_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.div(o)

    __truediv__ = __floordiv__

    def __mod__(self, o):
        if isinstance(o, FlowInt):
            return self.mod_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.mod(o)

    def __divmod__(self, o):
        if isinstance(o, FlowInt):
            return self.divmod_digit(o)
        o = self._natural(o)
        return o if o is NotImplemented else self.divmod(o)

    def __lshift__(self, n):
        return self.shift_left(n)

    def __rshift__(self, n):
        return self.shift_right(n)

    def __or__(self, o):
        o = self._natural(o)
        return o if o is NotImplemented else self.bit_or(o)

    def __and__(self, o):
        o = self._natural(o)
        return o if o is NotImplemented else self.bit_and(o)

    def __xor__(self, o):
        o = self._natural(o)
        return o if o is NotImplemented else self.bit_xor(o)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__
