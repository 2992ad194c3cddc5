"""Handyman utility package.

Small, dependency-light helpers. The vector types live in
:mod:`handyman.math.vector`.
"""

__version__ = "0.1.0"
