"""
Configuration package for cartotopo.

This package contains configuration loading and validation.

Modules:
    config_loader: Load and validate projection configuration from JSON
"""

__version__ = '1.0.0'
