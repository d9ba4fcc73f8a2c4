"""Feature packages of backup-manager."""
