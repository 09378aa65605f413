#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from pynat.errors import DivisionByZero, InvalidArgument


class FlowInt:
    '''
    Fixed-width unsigned integers, integers that explicitly over- or under-flow
    according to a particular number of bits. Abstract class that is sub-typed in this
    module.
    '''

    def __init__(self, num, num_bits=8):
        '''
        Initialize the class with a value that can be converted to an unsigned integer
        with the top-level int() call, and also a particular bit size.
        :param num: Integer value, a Python int, numpy integer or another FlowInt
        :param num_bits: Number of bits for this unsigned integer. Defaults to 8 for a
        traditional unsigned byte.
        '''
        self.num = int(num)
        self.num_bits = num_bits

        self.two_pow = 2 ** num_bits
        if self.num not in range(self.two_pow):
            raise InvalidArgument(f"Value {self.num} out-of-range for unsigned {num_bits:,d} bits")
        self.mask = self.two_pow - 1  # 0xFFF... or 0b111...

    def _other(self, o):
        '''
        Plain int value of the other operand, or NotImplemented so that Python
        tries the reflected operator (e.g. on a Natural).
        '''
        if isinstance(o, FlowInt):
            return o.num
        if isinstance(o, (int, np.integer)) and not isinstance(o, bool):
            return int(o)
        return NotImplemented

    def __int__(self):
        return self.num

    def __index__(self):
        return self.num

    def __hash__(self):
        return hash(self.num)

    def __bool__(self):
        return self.num != 0

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.num.__format__(*fmt_args)

    '''
    Comparison dunders cannot overflow, so just implement these with the underlying
    Python int() operators.
    '''
    def __eq__(self, o):
        v = self._other(o)
        return v if v is NotImplemented else self.num == v

    def __lt__(self, o):
        v = self._other(o)
        return v if v is NotImplemented else self.num < v

    def __le__(self, o):
        v = self._other(o)
        return v if v is NotImplemented else self.num <= v

    def __gt__(self, o):
        v = self._other(o)
        return v if v is NotImplemented else self.num > v

    def __ge__(self, o):
        v = self._other(o)
        return v if v is NotImplemented else self.num >= v


class UFlow(FlowInt):
    """
    Fixed-width unsigned integers, an integer that explicitly under- or over-flows
    according to a particular number of bits.
    """

    def __init__(self, num, num_bits=8):
        super().__init__(num, num_bits=num_bits)

    def __repr__(self):
        return f"uflow{self.num}"

    def _wrap(self, result):
        return self.__class__(result & self.mask, num_bits=self.num_bits)

    def __add__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num + v)

    def __sub__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num - v)

    def __mul__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num * v)

    def __floordiv__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        if v == 0:
            raise DivisionByZero(f"{self!r} divided by zero")
        return self._wrap(self.num // v)

    __truediv__ = __floordiv__

    def __mod__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        if v == 0:
            raise DivisionByZero(f"{self!r} modulo zero")
        return self._wrap(self.num % v)

    def __lshift__(self, n):
        if n < 0:
            raise InvalidArgument(f"Negative shift count {n}")
        return self._wrap(self.num << n)

    def __rshift__(self, n):
        if n < 0:
            raise InvalidArgument(f"Negative shift count {n}")
        return self._wrap(self.num >> n)

    def __or__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num | v)

    def __and__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num & v)

    def __xor__(self, o):
        v = self._other(o)
        if v is NotImplemented:
            return v
        return self._wrap(self.num ^ v)


class UFlow32(UFlow):
    """
    Class for the 32-bit unsigned digit a Natural is built from.
    """

    def __init__(self, num, num_bits=32):
        super().__init__(num, num_bits=32)
