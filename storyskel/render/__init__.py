"""Skeleton renderers."""

from .base import BaseRenderer
from .java_renderer import JavaSkeletonRenderer

__all__ = ["BaseRenderer", "JavaSkeletonRenderer"]
