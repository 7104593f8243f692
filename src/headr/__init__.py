"""headr: print the leading lines or bytes of files."""

__version__ = "0.1.0"
