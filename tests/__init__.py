"""
Test suite for arithmos

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
