"""User interface layers."""
