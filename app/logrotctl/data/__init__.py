"""Bundled data files for logrotctl."""
