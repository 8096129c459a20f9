"""
Test Utilities
==============

Assertion helpers and data generators shared by the test suite.
"""
