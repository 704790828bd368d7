"""Display-independent core of a calm window manager: menus, search, geometry and EWMH state."""

__version__ = "0.1.0"

__all__ = ["ewmh", "geometry", "items", "menu", "search", "strtonum", "util"]