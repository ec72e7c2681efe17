"""Infrastructure: persistence, security, and catalog sync."""
