"""Command line interface for the widget board."""
