"""Configuration package for backup-manager."""
