"""Small filesystem and input helpers."""
