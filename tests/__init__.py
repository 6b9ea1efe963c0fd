"""
Test suite for the percent package

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
