"""Models, in-memory repositories, a callback slot and view mappings for tasks, missions and presets."""

__version__ = "0.1.0"