"""
Rendering Module
================

Turn normalized attribute specifications into markup.

Components:
- template_renderer: string and function template rendering
- formatter: value formatting registry
- coordinates: DMS latitude/longitude formatting
- html: tag attribute helpers
"""
