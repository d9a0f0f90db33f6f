"""Command line tools: ``roku-discover`` and ``roku-remote``."""
