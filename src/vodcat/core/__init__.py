"""Core value codecs shared by the catalog and the API."""
