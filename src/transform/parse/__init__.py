"""Parsing of upstream replies."""
