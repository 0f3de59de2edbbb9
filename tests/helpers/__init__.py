"""
Test helpers.
"""
