"""Use cases for the prefix feature."""
