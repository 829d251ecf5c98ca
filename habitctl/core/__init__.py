"""
Configuration, exceptions and dependency wiring
"""
