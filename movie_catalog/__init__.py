"""
Movie Catalog Application Package.

This package contains the validation and persistence orchestration layer
for a single-table movie catalog: the record model, the persistence gateway,
the service that ties them together, and supporting configuration.
"""

__version__ = "1.0.0"
