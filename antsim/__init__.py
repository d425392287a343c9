"""Ant colony simulation model: grid world, ants, colonies, editor layout and brushes."""

__version__ = "1.0.0"

__all__ = [
    "ant",
    "async_renderer",
    "colony",
    "config",
    "cooldown",
    "double_buffer",
    "graph",
    "gui",
    "index_vector",
    "paths",
    "rounded_rectangle",
    "tools",
    "world",
]