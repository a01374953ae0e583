"""Submit handlers for the sign-up form."""

from .base_handler import BaseSubmitHandler
from .simulated_handler import SimulatedSubmitHandler

__all__ = [
    'BaseSubmitHandler',
    'SimulatedSubmitHandler',
]
