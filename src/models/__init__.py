"""Enums and schema objects."""
