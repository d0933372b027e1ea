"""API module for vodcat.

HTTP boundary only:
- Resolves the catalog root and path segments
- Maps catalog errors to status codes
- Forbidden: parsing entry files, filesystem scanning logic
"""
