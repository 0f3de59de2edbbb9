"""
Gardien - purchase-gated content key release.
"""

__version__ = "0.1.0"
