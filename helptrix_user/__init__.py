"""User profile domain types, service rules and Flask endpoints for Helptrix."""

__version__ = "0.1.0"
__all__ = ["controller", "domain", "service"]