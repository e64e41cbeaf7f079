"""
Examples Admin Console

A browser-facing console for curating before/after media examples and
audio samples stored behind the examples backend API.
"""

__version__ = "1.0.0"
