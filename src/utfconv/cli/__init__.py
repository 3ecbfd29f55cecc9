"""Command line interface for utfconv."""
