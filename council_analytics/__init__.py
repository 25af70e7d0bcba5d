"""Peer-ranking analytics for LLM council conversations."""

__version__ = "0.1.0"
