from .analyze import (
    Category,
    Coordinates,
    AnalyzeRequest,
    LocationInfo,
    ResolvedLocation,
    AnalyzeResult,
    TextPart,
    ImagePart,
    ImageURL,
    UserContentPart,
    TextContent,
    PartsContent,
    ChatContent,
    parse_chat_content,
)
from .base import Message, ErrorResponse

__all__ = [
    "Category",
    "Coordinates",
    "AnalyzeRequest",
    "LocationInfo",
    "ResolvedLocation",
    "AnalyzeResult",
    "TextPart",
    "ImagePart",
    "ImageURL",
    "UserContentPart",
    "TextContent",
    "PartsContent",
    "ChatContent",
    "parse_chat_content",
    "Message",
    "ErrorResponse",
]
