"""
Test suite for calcline

Contains:
- tests/unit/          : Unit tests for individual modules
"""
