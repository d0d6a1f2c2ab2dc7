from pydantic import BaseModel
from typing import Any, Dict, Optional


class Message(BaseModel):
    message: str


class ErrorResponse(Message):
    error_code: str
    request_id: str
    details: Optional[Dict[str, Any]] = None
