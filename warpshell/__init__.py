"""An interactive shell with directory, search, process and history built-ins."""

__version__ = "0.1.0"