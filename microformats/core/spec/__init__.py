"""
Attribute Specification Module
==============================

Parsing, validation and normalization of microformat attribute specifications.

Components:
- parser: shorthand parsing and Cerberus validation of structured entries
- normalizer: defaulting, value resolution and embedded microformat recursion
"""
