"""
Business logic services
"""
from . import habits
from . import bootstrap
from . import editor

__all__ = [
    'habits',
    'bootstrap',
    'editor'
]
