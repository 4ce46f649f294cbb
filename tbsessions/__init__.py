"""Dumping, exporting and rotating saved Firefox and Qutebrowser sessions."""
