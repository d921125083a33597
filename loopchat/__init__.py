"""Two-party console chat over loopback TCP, with users, messages and SHA-1."""

__version__ = "0.1.0"
__all__ = ["console", "sha1", "tcpchat", "user"]