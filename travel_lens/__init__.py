"""
Travel Lens relay: enriches a traveler's question with location context and
forwards it to a multimodal chat-completion API.
"""

__version__ = "1.0.0"
