"""Application layer: ownership guard and entity services."""
