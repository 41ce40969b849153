"""Constant tables shared across fijos modules."""
