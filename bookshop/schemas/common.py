# bookshop/schemas/common.py

from typing import Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body returned for write-pipeline failures."""
    error: str
    detail: Optional[str] = None
