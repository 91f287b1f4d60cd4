"""
Top-level package for the Jarvis API.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
