"""HTML demo routes, one per URL synchronisation strategy.

Every route parses ``size``/``query`` the same way and renders the same product
list. They differ only in how the address bar is kept in step with the form.
"""
import json
import logging
from typing import List, Optional

from datastar_py import ServerSentEventGenerator as SSE
from datastar_py.fastapi import DatastarResponse
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from app.core.config import CLIENT_SIDE_PATH, MPA_PATH, SERVER_PATCH_PATH, SESSIONS_PATH
from app.core.sse import is_datastar_request
from app.core.templates import render_fragment, templates
from app.models import Filter, Product
from app.services.filters import build_filter_url, parse_filter_input
from app.services.store import InMemoryProductStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

DEMOS = [
    {"href": MPA_PATH, "label": "Search Plain"},
    {"href": CLIENT_SIDE_PATH, "label": "Search Update URL Client-Side"},
    {"href": SERVER_PATCH_PATH, "label": "Search Server Patch"},
    {"href": SESSIONS_PATH, "label": "Search Sessions"},
]

# Client-side rebuild of the filter query string from the form's signals.
# Deliberately a second copy of build_filter_url's logic, living in the browser.
CLIENT_QUERY_STRING = "'?size='+encodeURIComponent($size)+'&query='+encodeURIComponent($query)"


def _signals(search_filter: Filter) -> dict:
    return {"size": search_filter.size.value, "query": search_filter.query or ""}


def _replace_history_script(url_expression: str) -> str:
    return (
        "window.history.replaceState({}, '', "
        f"new URL({url_expression}, window.location.href).toString())"
    )


def _search_context(
    header_template: str,
    path: str,
    search_filter: Filter,
    products: List[Product],
    **extra,
) -> dict:
    return {
        "header_template": header_template,
        "path": path,
        "search_filter": search_filter,
        "products": products,
        **extra,
    }


def _patch_body(context: dict):
    return SSE.patch_elements(render_fragment("search_fragment.html", **context))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"demos": DEMOS})


@router.get(MPA_PATH, response_class=HTMLResponse)
async def search_mpa(
    request: Request,
    size: Optional[str] = None,
    query: Optional[str] = None,
    store: InMemoryProductStore = Depends(get_store),
):
    """Plain multi-page search.

    The form submits to this same resource with ``method="get"`` whenever the
    size select changes, so every filter change is a full navigation.
    """
    search_filter = parse_filter_input(size=size, query=query)
    context = _search_context(
        "partials/mpa_header.html",
        MPA_PATH,
        search_filter,
        store.all_filtered(search_filter),
        on_input="evt.target.tagName === 'SELECT' && evt.target.form.requestSubmit()",
    )
    return templates.TemplateResponse(request, "search_page.html", context)


@router.get(CLIENT_SIDE_PATH, response_class=HTMLResponse)
async def search_update_url_client_side(
    request: Request,
    size: Optional[str] = None,
    query: Optional[str] = None,
    store: InMemoryProductStore = Depends(get_store),
):
    """The browser fetches the patch and rewrites the URL on its own.

    Both URLs are derived client-side from the form's signals; the server
    cannot supply them because it only ever sees the original request state.
    """
    search_filter = parse_filter_input(size=size, query=query)
    fetch_products = f"@get({json.dumps(CLIENT_SIDE_PATH)}+{CLIENT_QUERY_STRING})"
    update_query_params = _replace_history_script(f"window.location.pathname+{CLIENT_QUERY_STRING}")
    context = _search_context(
        "partials/client_side_header.html",
        CLIENT_SIDE_PATH,
        search_filter,
        store.all_filtered(search_filter),
        signals=_signals(search_filter),
        on_submit=f"evt.preventDefault(); {fetch_products}; {update_query_params}",
    )

    if is_datastar_request(request):
        return DatastarResponse(_patch_body(context))
    return templates.TemplateResponse(request, "search_page.html", context)


@router.get(SERVER_PATCH_PATH, response_class=HTMLResponse)
async def search_server_patch(
    request: Request,
    size: Optional[str] = None,
    query: Optional[str] = None,
    store: InMemoryProductStore = Depends(get_store),
):
    """The server owns the filter URL.

    The same ``build_filter_url`` result feeds the share link and, on Datastar
    requests, the script that replaces the browser's history entry.
    """
    search_filter = parse_filter_input(size=size, query=query)
    filter_url = build_filter_url(SERVER_PATCH_PATH, search_filter)
    context = _search_context(
        "partials/server_patch_header.html",
        SERVER_PATCH_PATH,
        search_filter,
        store.all_filtered(search_filter),
        signals=_signals(search_filter),
        on_submit=f"evt.preventDefault(); @get({json.dumps(SERVER_PATCH_PATH)}+{CLIENT_QUERY_STRING})",
        filter_url=filter_url,
    )

    if not is_datastar_request(request):
        return templates.TemplateResponse(request, "search_page.html", context)

    logger.debug("Patching %s with history url %s", SERVER_PATCH_PATH, filter_url)
    return DatastarResponse(
        [
            _patch_body(context),
            SSE.execute_script(_replace_history_script(json.dumps(filter_url))),
        ]
    )


@router.get("/product/{product_id}", response_class=HTMLResponse)
async def product_detail(
    request: Request,
    product_id: int,
    store: InMemoryProductStore = Depends(get_store),
):
    product = store.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    back_url = build_filter_url(MPA_PATH, Filter(size=product.size))
    return templates.TemplateResponse(
        request, "product_detail.html", {"product": product, "back_url": back_url}
    )
