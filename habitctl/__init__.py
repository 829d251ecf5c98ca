"""
habitctl - Minimalist command line habit tracker
"""
__version__ = "0.1.0"
