"""Static greeting endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["greetings"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "Hello world"


@router.get("/evening", response_class=PlainTextResponse)
async def evening():
    return "Good evening"
