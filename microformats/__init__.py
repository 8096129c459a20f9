"""
Microformats
============

Render microformats (http://microformats.org) from a declarative list of
attribute specifications and a data model.

This package provides:
- A shorthand and structured attribute specification language
- Recursive rendering of embedded microformats
- String and function templates for attribute markup
- A formatter registry including DMS latitude/longitude formatting
"""

__version__ = "1.0.0"
__author__ = "Microformats Renderer Team"
