"""adminkit: permission catalog, claims-based authorization, and filtered list queries."""

__version__ = "1.0.0"
