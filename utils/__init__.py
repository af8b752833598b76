"""
Utility helpers for request validation and response formatting.
"""
