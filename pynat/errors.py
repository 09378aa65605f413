#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Error conditions raised by natural number construction and arithmetic. None
of these have a fallback result, the computation is aborted and the caller
decides what to do.
'''


class NaturalError(ArithmeticError):
    '''
    Base class for everything raised by this package.
    '''


class InvalidArgument(NaturalError, ValueError):
    '''
    Malformed input, e.g. an empty digit list or a digit wider than 32 bits.
    '''


class NegativeValue(NaturalError, ValueError):
    '''
    Negative input to a constructor, naturals are unsigned-only.
    '''


class Underflow(NaturalError):
    '''
    Subtraction whose true result would be below zero.
    '''


class DivisionByZero(NaturalError, ZeroDivisionError):
    pass


class Unsupported(NaturalError, NotImplementedError):
    '''
    Division by a multi-digit divisor that is not an exact power of two.
    '''
