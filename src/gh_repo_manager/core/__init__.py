"""Core pipeline stages: argument parsing, fetching, rendering and cloning."""
