"""Core: configuration, logging, and the error taxonomy."""
