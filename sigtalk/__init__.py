"""Text messaging between processes over SIGUSR1 and SIGUSR2, with its client, server and helpers."""

__version__ = "0.1.0"
__all__ = ["client", "compare", "printf", "protocol", "server", "textops"]