"""evensplit - settle a shared pool of expenses with a few transfers."""

__version__ = "0.1.0"
