# app/features/keywords/router.py
from fastapi import APIRouter
from .schemas import KeywordsResponse
from .catalog import catalog_as_dict, total_keywords

router = APIRouter(tags=["keywords"])

@router.get("/keywords", response_model=KeywordsResponse)
async def keywords_endpoint() -> KeywordsResponse:
    return KeywordsResponse(categories=catalog_as_dict(), total_keywords=total_keywords())
