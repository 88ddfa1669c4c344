"""
Test suite for NSPOINTS

Contains:
- tests/unit/          : Unit tests for individual modules and the token facade
"""
