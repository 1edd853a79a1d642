"""Timed LED animations."""

from .engine import Animator, LedSurface

__all__ = ["Animator", "LedSurface"]
