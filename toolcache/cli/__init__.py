"""Toolcache command-line interface."""
