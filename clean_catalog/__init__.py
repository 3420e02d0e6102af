"""
Clean Catalog

Layered create-and-rename workflow for catalog categories with pluggable
persistence and output formatting.
"""

__version__ = "1.0.0"
