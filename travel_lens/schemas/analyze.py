"""Request/response models for the analyze endpoint."""
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Category(str, Enum):
    MENU = "menu"
    SUPERMARKET = "supermarket"
    ATTRACTION = "attraction"

    @classmethod
    def values(cls) -> List[str]:
        return [c.value for c in cls]


class Coordinates(BaseModel):
    lat: float
    lng: float


class AnalyzeRequest(BaseModel):
    """Validated body of POST /api/ai/analyze."""
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    image_base64: List[str] = Field(default_factory=list, alias="imageBase64")
    category: Category
    location: Coordinates


class LocationInfo(BaseModel):
    country: str
    region: str
    city: Optional[str] = None


class ResolvedLocation(LocationInfo):
    lat: float
    lng: float

    @classmethod
    def combine(cls, info: LocationInfo, coords: Coordinates) -> "ResolvedLocation":
        return cls(**info.model_dump(), lat=coords.lat, lng=coords.lng)


class AnalyzeResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    model: str
    location: ResolvedLocation
    category: Category
    prompt_used: str = Field(alias="promptUsed")
    content: str

    def to_response(self) -> dict:
        """JSON body as returned to the caller (camelCase, absent city omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Outbound message parts (OpenAI chat-completion shape)

class ImageURL(BaseModel):
    url: str
    detail: Literal["auto", "low", "high"] = "auto"


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ImagePart(BaseModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


UserContentPart = Union[TextPart, ImagePart]


# Inbound completion content: either a plain string or a list of typed parts

class TextContent(BaseModel):
    kind: Literal["text"] = "text"
    text: str

    def as_text(self) -> str:
        return self.text


class ResponsePart(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    text: Optional[str] = None


class PartsContent(BaseModel):
    kind: Literal["parts"] = "parts"
    parts: List[ResponsePart]

    def as_text(self) -> str:
        return "\n".join(
            (part.text or "") if part.type == "text" else ""
            for part in self.parts
        ).strip()


ChatContent = Union[TextContent, PartsContent]


def _response_part(raw: Any) -> ResponsePart:
    # anything unreadable counts as a non-text part
    if not isinstance(raw, dict):
        return ResponsePart()
    try:
        return ResponsePart.model_validate(raw)
    except ValidationError:
        return ResponsePart()


def parse_chat_content(raw: Any) -> ChatContent:
    """Classify the provider's ``message.content`` into one of the two variants."""
    if isinstance(raw, list):
        return PartsContent(parts=[_response_part(p) for p in raw])
    if raw is None:
        return TextContent(text="")
    return TextContent(text=str(raw))
