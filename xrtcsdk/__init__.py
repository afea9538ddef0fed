"""Building blocks for a real-time video streaming client: JSON values, URLs, HTTP and media chains."""

__version__ = "0.1.0"