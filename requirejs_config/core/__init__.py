"""Core utilities and shared application primitives.

Modules in this package are framework-light: settings, request
validation and the middleware shared by the HTTP surface.
"""
