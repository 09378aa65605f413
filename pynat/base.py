#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Stateless functions and constants that are used throughout the Natural
arithmetic. Digits are handled as plain Python ints in [0, 2**32) and every
intermediate is "widened", i.e. kept as an unbounded int and split back into
digit and carry.
'''

DIGIT_BITS = 32
DIGIT_MASK = (1 << DIGIT_BITS) - 1  # 0xFFFFFFFF
FIXED64_MASK = (1 << (2 * DIGIT_BITS)) - 1
FIXED31_MASK = 0x7FFFFFFF

# decimal rendering peels off nine digits at a time
DECIMAL_GROUP = 10 ** 9
DECIMAL_GROUP_WIDTH = 9


def split_wide(wide):
    '''
    Split a widened (up to 64-bit) intermediate into its low digit and the
    carry into the next, more significant position.
    '''
    return wide & DIGIT_MASK, wide >> DIGIT_BITS


def digit_bit_index(d):
    '''
    Zero-based index of the single set bit of a digit, or -1 if the digit is
    zero or has more than one bit set.
    '''
    if d == 0 or d & (d - 1):
        return -1
    return d.bit_length() - 1


def compare_ints(a, b, tie=0):
    '''
    Three-way comparison of two digits, falling back to an earlier verdict
    when they are equal.
    '''
    if a < b:
        return -1
    elif a > b:
        return 1
    return tie


def trim_digits(digits):
    '''
    Drop the most-significant zero digits of a least-significant-first
    sequence, always leaving at least one digit.
    '''
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])
