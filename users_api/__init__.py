"""Users API: a single user resource exposed over HTTP."""

__version__ = "0.1.0"
