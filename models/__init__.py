"""
Models package for agent invocations and response envelopes.
"""

from .action_response import ActionResponse
from .invocation import Invocation, Parameter

__all__ = ["ActionResponse", "Invocation", "Parameter"]
