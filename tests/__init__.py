"""
Test suite for the 4-4-5 fiscal calendar library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
