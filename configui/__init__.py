"""
Config UI Example: health and readiness resources with a Swagger UI.
"""

__version__ = "1.0.0"
