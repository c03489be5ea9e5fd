"""Pydantic models for response validation."""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    msg: str
