"""A minimal interactive shell with echo and exit builtins and PATH lookup."""

__version__ = "0.1.0"