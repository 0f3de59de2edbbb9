"""
Domain layer: value objects, service interfaces and exceptions.
"""
