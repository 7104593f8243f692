"""Feature packages for headr."""
