"""
Core Logic
==========

Specification parsing, normalization, rendering and the microformat engine.
"""
