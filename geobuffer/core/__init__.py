"""Logging, configuration, errors and the command line."""
