"""Catalog layer: reads collections of entry files from disk.

Per request, nothing is cached:
- scanner lists a collection directory
- loader parses one entry file
- lookup resolves a single entry by id
"""
