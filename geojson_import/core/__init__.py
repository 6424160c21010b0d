"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: GeoJSON member names, geometry types, relation roles
- exceptions: Custom exception hierarchy
"""
