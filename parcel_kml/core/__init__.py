"""Core utilities and shared infrastructure.

- config: Export configuration loading and validation
- constants: Named geometric and classification constants
- exceptions: Structured exception hierarchy
"""
