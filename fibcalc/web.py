"""
HTTP endpoint for fibcalc.

POST /fib takes {"n": <int>} and answers {"F": "<decimal string>"}. Values are
sent as strings so JSON clients never round them through a float.
"""

import asyncio
import logging
import time

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.gzip import GZipMiddleware
from pydantic import BaseModel, Field

from .config import Config
from .core import Fib
from .render import decimal

logger = logging.getLogger(__name__)

INVALID_RANGE = "Invalid range: end < start"


class FibArgs(BaseModel):
    n: int = Field(..., ge=0, description="Index of the Fibonacci number")


class FibResponse(BaseModel):
    F: str


class RangeArgs(BaseModel):
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


class RangeResponse(BaseModel):
    start: int
    end: int
    F: list[str]


app = FastAPI(title="fibcalc", version=Config.VERSION)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed,
    )
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/fib", response_model=FibResponse)
async def fib_handler(args: FibArgs) -> FibResponse:
    # Big indices take a while; keep the event loop free.
    value = await asyncio.to_thread(Fib.single, args.n)
    return FibResponse(F=decimal(value))


@app.post("/range", response_model=RangeResponse)
async def range_handler(args: RangeArgs) -> RangeResponse:
    if args.end < args.start:
        raise HTTPException(status_code=400, detail=INVALID_RANGE)
    values = await asyncio.to_thread(Fib.range, args.start, args.end)
    return RangeResponse(
        start=args.start,
        end=args.end,
        F=[decimal(v) for v in values],
    )


def serve(host: str = None, port: int = None) -> None:
    """Run the HTTP endpoint with uvicorn."""
    host = host or Config.HOST
    port = port or Config.PORT
    logger.info("serving on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=Config.LOG_LEVEL.lower())
