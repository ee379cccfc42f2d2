"""Organization hierarchy auditing: salary bands and reporting-line depth."""

__version__ = "0.1.0"
