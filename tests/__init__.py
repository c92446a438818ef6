"""
Test suite for arbint

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
