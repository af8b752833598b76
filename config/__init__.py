"""
Configuration package for the outbreak simulation backend.
"""

from .settings import settings

__version__ = "1.0.0" 
