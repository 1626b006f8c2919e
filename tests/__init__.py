"""
Test suite for jdncal

Contains:
- tests/unit/          : Unit tests for conversion, periods, names and utils
"""
