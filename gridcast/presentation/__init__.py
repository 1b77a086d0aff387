"""
Presentation Layer Package

HTTP surface of the service.
"""
