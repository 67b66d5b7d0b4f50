"""
Exposes the version of geoutm
"""

__all__ = ['__version__']

# Read by setup.py; keep the 'vX.Y.Z' form
__version__ = 'v0.1.0'
