"""
Shared utility functions.

This subpackage includes:
- YAML configuration loading
- directory helpers
- lightweight logging helpers used across the project.
"""
