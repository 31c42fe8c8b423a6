"""
AI module - Pluggable AI providers.
"""

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider

__all__ = ["AIProvider", "ClaudeProvider"]
