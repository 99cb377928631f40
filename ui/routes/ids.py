"""Identifier issuing routes."""

from fastapi import APIRouter, Depends, Query

from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["ids"])

MAX_LENGTH = 1024
MAX_COUNT = 1000

# These will be set by app.py
_random_generator = None
_sortable_generator = None
_default_length = 16


def init(random_generator, sortable_generator, default_length=16):
    """Initialize with the generators this process issues from."""
    global _random_generator, _sortable_generator, _default_length
    _random_generator = random_generator
    _sortable_generator = sortable_generator
    _default_length = default_length


@router.get("/ids")
async def ids(length: int = Query(None, le=MAX_LENGTH), count: int = Query(1, ge=1, le=MAX_COUNT)):
    """Issue `count` random ids of `length` symbols."""
    if length is None:
        length = _default_length
    return {"ids": [_random_generator.generate(length) for _ in range(count)]}


@router.get("/ids/sortable")
async def sortable_ids(count: int = Query(1, ge=1, le=MAX_COUNT)):
    """Issue `count` sortable ids, in ascending order."""
    return {"ids": [_sortable_generator.generate() for _ in range(count)]}


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return generator statistics (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "random": _random_generator.stats(),
        "sortable": _sortable_generator.stats(),
    }
