"""Geometry, layouts, object-tree walks, focus handling, menus, resources and logging for widget toolkits."""

__version__ = "0.1.0"