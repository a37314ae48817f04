"""
Core app - plumbing shared by the catalog apps.

- Zero-based pagination and ``field,direction`` sort parsing
- Caller identification through the ``X-User-ID`` header
"""
