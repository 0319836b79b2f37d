"""
Core components for driving a spinning mesh scene.
"""

from .scene import SpinningScene

__all__ = ["SpinningScene"]
