"""Person Converter service."""
