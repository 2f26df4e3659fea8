# app/features/story/schemas.py
from pydantic import BaseModel, Field
from typing import Any, List, Optional

class StoryRequest(BaseModel):
    keywords: Optional[List[str]] = Field(None, description="Catalog keywords; random ones are picked when omitted")
    name: Optional[str] = Field(None, description="Main character name")
    # coerced and range-checked by the validator so bad ages answer 400, not 422
    age: Any = Field(None, description="Main character age, 1-16")

class StoryResponse(BaseModel):
    story: str
    keywords_used: List[str]
    cached: bool

class ErrorResponse(BaseModel):
    error: str
    message: str
    invalidKeywords: Optional[List[str]] = None
