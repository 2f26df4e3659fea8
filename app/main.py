from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.logger import get_logger
from app.lib.openai_client import OpenAIStoryGenerator
from app.lib.story_cache import InMemoryStoryCache
from app.features.keywords.router import router as keywords_router
from app.features.story.router import router as story_router
from app.features.health.router import router as health_router

log = get_logger(__name__)

app = FastAPI(title="Keyword Story API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=False,           # wildcard origins don't mix with credentials
    allow_methods=["*"],
    allow_headers=["*"],
)

# Process-wide state; tests swap these per test
app.state.story_cache = InMemoryStoryCache()
app.state.story_generator = OpenAIStoryGenerator()
app.state.rng = None

app.include_router(keywords_router)
app.include_router(story_router)
app.include_router(health_router)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception(f"unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "message": "Internal server error"},
    )
