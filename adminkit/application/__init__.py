"""Application layer: catalog, authorization, and query composition."""
