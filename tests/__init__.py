"""
Test suite for septem

Contains:
- tests/unit/          : Unit tests for individual modules
"""
