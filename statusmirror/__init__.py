"""
Status Mirror — Mirror status conditions from one resource onto another.
"""

__version__ = "0.1.0"
