"""backup-manager: inspect configured backup storage destinations."""

__version__ = "0.1.0"
