"""
Persistence Module — Load and save resource files.
"""

from .object_file import load_object, load_resource, save_resource

__all__ = [
    "load_object",
    "load_resource",
    "save_resource",
]
