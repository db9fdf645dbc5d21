"""
Route table of the API.

Routes are registered in declaration order and the first match wins, so
literal demo paths come before the greedy ``search`` and ``product``
captures. Anything that matches no route is redirected to ``/``.
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from app.routers import demo, info, product, search


ROUTES = [
    ("/", info.root, "info"),
    ("/hello", demo.hello, "hello"),
    ("/hello/world", demo.world, "hello_world"),
    ("/hello/мир", demo.mir, "hello_mir"),
    ("/wave/{name}/{age}", demo.wave, "wave"),
    ("/search", search.search_root, "search"),
    ("/search/{query:path}", search.search_with_query, "search_with_query"),
    ("/product", product.product_root, "product_without_url"),
    ("/product/{url:path}", product.product_route, "product"),
]


def build_router() -> APIRouter:
    """Create the single router serving every GET endpoint."""
    router = APIRouter()
    for path, endpoint, name in ROUTES:
        router.add_api_route(path, endpoint, methods=["GET"], name=name)
    return router


def redirect_to_root() -> RedirectResponse:
    """Permanent redirect used for every unmatched path."""
    return RedirectResponse(url="/", status_code=308)
