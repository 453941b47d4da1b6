"""Blog Routes — the HTML page surface: listing, single post, category archive.

Invariants:
    - Each route calls exactly one resolver and renders its ViewResult
    - Resolvers own failure mapping: no HTTPException raised from here
    - Page segments are taken as raw strings; parsing lives in core/pagination.py
    - Only the path selects a page: unpaginated routes pass None, never a query value
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from wp_frontend.config import Settings, get_settings
from wp_frontend.infrastructure.renderer import render
from wp_frontend.infrastructure.wordpress_client import WordPressClient, get_wp_client
from wp_frontend.services.resolve_category import resolve_category
from wp_frontend.services.resolve_listing import resolve_listing
from wp_frontend.services.resolve_post import resolve_post

router = APIRouter(tags=["blog"], default_response_class=HTMLResponse)


@router.get("/")
async def home(
    request: Request,
    client: WordPressClient = Depends(get_wp_client),
    settings: Settings = Depends(get_settings),
):
    """Home page: always the first page, query string ignored."""
    result = await resolve_listing(client, None, settings.site_title)
    return render(request, result)


@router.get("/page/{page_number}")
async def listing_page(
    request: Request,
    page_number: str,
    client: WordPressClient = Depends(get_wp_client),
    settings: Settings = Depends(get_settings),
):
    """Paginated listing page."""
    result = await resolve_listing(client, page_number, settings.site_title)
    return render(request, result)


@router.get("/post/{slug}")
async def single_post(
    request: Request,
    slug: str,
    client: WordPressClient = Depends(get_wp_client),
):
    """Single post page."""
    result = await resolve_post(client, slug)
    return render(request, result)


@router.get("/category/{slug}")
async def category_archive(
    request: Request,
    slug: str,
    client: WordPressClient = Depends(get_wp_client),
):
    """Category archive, first page."""
    result = await resolve_category(client, slug, None)
    return render(request, result)


@router.get("/category/{slug}/page/{page_number}")
async def category_archive_page(
    request: Request,
    slug: str,
    page_number: str,
    client: WordPressClient = Depends(get_wp_client),
):
    """Paginated category archive page."""
    result = await resolve_category(client, slug, page_number)
    return render(request, result)
