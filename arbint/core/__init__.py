"""
Core integer engine: state-free algorithms and domain types.

This package contains the building blocks of the arbitrary-precision integer
engine and depends on nothing outside of it.
"""
