"""HTTP surface of the parsing service."""
