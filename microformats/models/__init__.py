"""
Data Models
===========

Pydantic models for attribute specifications, templates and documents.
"""
