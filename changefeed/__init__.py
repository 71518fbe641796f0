"""Generate an Atom feed from the latest release in a changelog."""

__version__ = "0.1.0"
