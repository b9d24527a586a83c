"""Core path-mapping logic for dapmapper."""
