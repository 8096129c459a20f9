"""
Test Suite
==========

Test suite matching the microformats/ package structure.

Test Categories:
- unit: Unit tests for individual components
"""
