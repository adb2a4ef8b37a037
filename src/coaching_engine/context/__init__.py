"""Context assembly and prompt rendering."""

from coaching_engine.context.builder import build_coaching_context
from coaching_engine.context.serializer import serialize_context_for_prompt

__all__ = ["build_coaching_context", "serialize_context_for_prompt"]
