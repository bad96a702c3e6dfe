"""Fuzz testing for formatpattern.

This package contains:
- test_formatter_totality: Chaos patterns and arbitrary values never raise,
  plus differential checks against Python's own number formatting

Python 3.13+.
"""
