"""
scopedattr utilities package
"""

from .config import hint_key_name

__all__ = ["hint_key_name"]
