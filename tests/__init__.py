"""
Test suite for setkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
