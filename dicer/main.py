from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.requests import Request

from dicer import __version__
from dicer.config import settings
from dicer.errors import ParseError
from dicer.routers import rolls
from dicer.schemas import ParseErrorResponse

app = FastAPI(title="Dicer", version=__version__, debug=settings.debug)

app.include_router(rolls.router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "environment": settings.environment}


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    body = ParseErrorResponse(detail=str(exc), kind=exc.kind, fragment=exc.fragment)
    return JSONResponse(status_code=400, content=body.model_dump())
