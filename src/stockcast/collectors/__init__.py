"""Price history sources."""
