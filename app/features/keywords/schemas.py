# app/features/keywords/schemas.py
from pydantic import BaseModel, Field
from typing import Dict, List

class KeywordsResponse(BaseModel):
    categories: Dict[str, List[str]] = Field(..., description="Category name → allowed keywords")
    total_keywords: int = Field(..., ge=0, description="Number of keywords across all categories")
