"""
Test suite for primefrac

Contains:
- tests/unit/          : Unit tests for individual modules
"""
