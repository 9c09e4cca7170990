"""
Legends: Monsters and Heroes.

This package contains the combat resolution engine, the entity and item
models it operates on, the monster spawner, the market transaction rules and
the terminal adapters that drive them.
"""

__version__ = "1.0.0"
