"""
Greeting endpoints kept around as smoke tests for the deployment.
"""

from fastapi import Request
from fastapi.responses import Response

from app.core import envelope
from app.core.binder import bind_age, bind_flag, bind_lang, parse_query
from app.models import Lang


GREETINGS = {
    Lang.ENGLISH: "Hello",
    Lang.RUSSIAN: "Привет",
    None: "Hi",
}


async def hello(request: Request) -> Response:
    """
    Greeting tuned by query options.

    Try ``/hello?emoji``, ``/hello?lang=ру`` or ``/hello?name=Rocketeer&lang=en``.
    """
    params = parse_query(request.scope["query_string"]) or {}
    lang = bind_lang(params)

    greeting = "👋 " if bind_flag(params, "emoji") else ""
    greeting += GREETINGS[lang]
    if params.get("name"):
        greeting += f", {params['name']}"
    return envelope.success(greeting + "!")


async def world() -> Response:
    return envelope.success("Hello, world!")


async def mir() -> Response:
    return envelope.success("Привет, мир!")


async def wave(name: str, age: str) -> Response:
    return envelope.success(f"👋 Hello, {bind_age(age)} year old named {name}!")
