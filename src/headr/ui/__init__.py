"""User interface layers for headr."""
