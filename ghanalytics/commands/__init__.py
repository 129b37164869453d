"""Command modules for the ghanalytics CLI."""
