"""dapmapper - Docker bind mount path mappings for DAP debuggers."""

__version__ = "0.1.0"
