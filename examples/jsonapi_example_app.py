"""Example FastAPI app negotiating JSON:API extensions and profiles.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_jsonapi_headers import (
    ContentNegotiationMiddleware,
    ErrorHandlerMiddleware,
    MediaTypeHeaderBuilder,
)
from fastapi_jsonapi_headers.middleware.content_negotiation import STATE_KEY

logging.basicConfig(level=logging.DEBUG)

ATOMIC_EXTENSION = "https://jsonapi.org/ext/atomic"

app = FastAPI(title="JSON:API headers example")
app.add_middleware(ContentNegotiationMiddleware)
app.add_middleware(ErrorHandlerMiddleware)


def _jsonapi_response(content: dict, builder: MediaTypeHeaderBuilder, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, media_type=builder.build().format())


@app.get("/articles")
async def list_articles() -> JSONResponse:
    builder = MediaTypeHeaderBuilder()
    return _jsonapi_response({"data": []}, builder)


@app.post("/operations")
async def atomic_operations(request: Request) -> JSONResponse:
    requested: MediaTypeHeaderBuilder = getattr(request.state, STATE_KEY)
    body = await request.json()
    response = MediaTypeHeaderBuilder().add_extension(ATOMIC_EXTENSION)
    for profile in requested.profiles:
        response.add_profile(profile)
    results = [{"data": None} for _ in body.get("atomic:operations", [])]
    return _jsonapi_response({"atomic:results": results}, response)
