"""Pick which installed web browser opens each link, and register as a Windows browser."""

__version__ = "0.1.0"