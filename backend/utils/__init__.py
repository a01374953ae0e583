"""Utility modules for the sign-up form."""

from .banner_timer import BannerTimer

__all__ = [
    'BannerTimer',
]
