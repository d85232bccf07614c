"""Bit masks, bit-field extraction and digital roots."""

from __future__ import annotations


def bit_mask(low: int, high: int) -> int:
    """Return a mask with bits ``low`` through ``high`` (inclusive) set."""
    if low < 0 or high < low:
        raise ValueError(f"invalid bit range {low}..{high}")
    return ((1 << (high - low + 1)) - 1) << low


def extract_bits(value: int, low: int, high: int) -> int:
    """Return bits ``low`` through ``high`` of ``value``, shifted down to bit 0."""
    return (value & bit_mask(low, high)) >> low


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains.

    Zero and negative numbers give 0.
    """
    if num <= 0:
        return 0
    while num >= 10:
        num = sum(int(digit) for digit in str(num))
    return num