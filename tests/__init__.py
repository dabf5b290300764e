"""
Test suite for the numeric utility library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
