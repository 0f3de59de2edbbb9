"""
Infrastructure adapters for Gardien.
"""
