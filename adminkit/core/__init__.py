"""Core: configuration, permission declarations, and app wiring."""
