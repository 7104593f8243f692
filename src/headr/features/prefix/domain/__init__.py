"""Domain models for the prefix feature."""
