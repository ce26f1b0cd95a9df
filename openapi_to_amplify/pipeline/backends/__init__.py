"""
Code generation backends.
"""

from .amplify_backend import AmplifyBackend
from .base import CodeBackend

__all__ = ["CodeBackend", "AmplifyBackend"]
