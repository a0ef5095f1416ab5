"""OCI prestart hook that hands accelerator containers to the configuration tool."""

__version__ = "0.1.0"
