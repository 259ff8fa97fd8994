"""CLI entry point for the Hashnode client."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from hashnode_client import facade
from hashnode_client.config import Settings, get_settings
from hashnode_client.core import Post, WebhookValidationError
from hashnode_client.service import HashnodeService
from hashnode_client.webhooks import is_post_event, parse_payload, verify_signature

app = typer.Typer(help="Read a Hashnode publication from the command line.")


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config"),
    host: Optional[str] = typer.Option(None, "--host", help="Publication host, e.g. blog.example.com"),
    debug: bool = typer.Option(False, "--debug", help="Log every GraphQL request"),
) -> None:
    """Load settings shared by all commands."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = get_settings(config)
    if host:
        settings.hashnode.publication_host = host
    ctx.obj = settings


def _service(ctx: typer.Context) -> HashnodeService:
    settings: Settings = ctx.obj
    return HashnodeService(settings)


def _print_posts(posts: list[Post]) -> None:
    for index, post in enumerate(posts, 1):
        published = post.published_at.strftime("%d.%m.%Y") if post.published_at else "—"
        print(f"  {index}. {post.title}")
        print(f"     └─ {post.slug} • {published} • {post.read_time_in_minutes} min")


@app.command()
def publication(ctx: typer.Context) -> None:
    """Show publication details."""
    result = asyncio.run(facade.get_publication(_service(ctx)))

    if not result:
        print("✗ Failed to fetch publication")
        raise typer.Exit(code=1)

    print(f"📰 {result.title}")
    print(f"  └─ URL: {result.url}")
    print(f"  └─ Description: {result.description_seo or 'N/A'}")
    if result.author:
        print(f"  └─ Author: {result.author.name} (@{result.author.username})")


@app.command()
def posts(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of posts"),
) -> None:
    """List the latest posts."""
    result = asyncio.run(facade.get_blog_posts(_service(ctx), count))
    print(f"📝 Posts: {len(result)}")
    _print_posts(result)


@app.command()
def post(ctx: typer.Context, slug: str) -> None:
    """Show a single post."""
    result = asyncio.run(facade.get_blog_post_by_slug(_service(ctx), slug))

    if not result:
        print(f"✗ Post not found: {slug}")
        raise typer.Exit(code=1)

    tags = ", ".join(tag.name for tag in result.tags) or "None"
    content_length = len(result.content.html or "") if result.content else 0

    print(f"📝 {result.title}")
    print(f"  └─ Author: {result.author.name if result.author else 'N/A'}")
    print(f"  └─ Tags: {tags}")
    print(f"  └─ Content length: {content_length} characters")
    print(f"  └─ Cover image: {'Yes' if result.cover_image and result.cover_image.url else 'No'}")


@app.command()
def search(
    ctx: typer.Context,
    query: str,
    limit: int = typer.Option(10, "--limit", "-n"),
) -> None:
    """Search posts of the publication."""
    result = asyncio.run(facade.search_posts(_service(ctx), query, limit))
    print(f"🔍 '{query}': {len(result)} posts")
    _print_posts(result)


@app.command()
def series(
    ctx: typer.Context,
    slug: Optional[str] = typer.Argument(None, help="Show posts of this series"),
    limit: int = typer.Option(10, "--limit", "-n"),
) -> None:
    """List series, or the posts of one series."""
    service = _service(ctx)

    if slug:
        details = asyncio.run(facade.get_series(service, slug))
        if not details:
            print(f"✗ Series not found: {slug}")
            raise typer.Exit(code=1)

        series_posts = asyncio.run(facade.get_series_posts(service, slug, limit))
        print(f"📚 {details.name}: {len(series_posts)} posts")
        _print_posts(series_posts)
        return

    result = asyncio.run(facade.get_series_list(service, limit))
    print(f"📚 Series: {len(result)}")
    for item in result:
        sort_order = item.sort_order.value if item.sort_order else "—"
        print(f"  • {item.name} ({item.slug}, {sort_order})")


@app.command()
def pages(
    ctx: typer.Context,
    slug: Optional[str] = typer.Argument(None, help="Show a single page"),
) -> None:
    """List static pages, or show one."""
    service = _service(ctx)

    if slug:
        page = asyncio.run(facade.get_static_page(service, slug))
        if not page:
            print(f"✗ Page not found: {slug}")
            raise typer.Exit(code=1)

        print(f"📄 {page.title}")
        print((page.content.text or "") if page.content else "")
        return

    result = asyncio.run(facade.get_static_pages(service))
    print(f"📄 Pages: {len(result)}")
    for item in result:
        hidden = " (hidden)" if item.hidden else ""
        print(f"  • {item.title} ({item.slug}){hidden}")


@app.command()
def comments(
    ctx: typer.Context,
    post_id: str,
    limit: int = typer.Option(20, "--limit", "-n"),
) -> None:
    """List comments on a post."""
    result = asyncio.run(facade.get_post_comments(_service(ctx), post_id, limit))
    print(f"💬 Comments: {len(result)}")
    for comment in result:
        author = comment.author.username if comment.author else "?"
        text = (comment.content.text or "") if comment.content else ""
        print(f"  • @{author} (+{comment.total_reactions}): {text[:80]}")


@app.command()
def drafts(
    ctx: typer.Context,
    limit: int = typer.Option(10, "--limit", "-n"),
) -> None:
    """List drafts. Needs HASHNODE_TOKEN."""
    settings: Settings = ctx.obj
    if not settings.access_token:
        print("⚠️  HASHNODE_TOKEN not set, drafts will be empty")

    result = asyncio.run(facade.get_drafts(_service(ctx), limit))
    print(f"✏️  Drafts: {len(result)}")
    for draft in result:
        print(f"  • {draft.title}")


@app.command("verify-webhook")
def verify_webhook(
    ctx: typer.Context,
    payload_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    signature: str = typer.Option(..., "--signature", "-s", help="Value of the x-hashnode-signature header"),
    secret: Optional[str] = typer.Option(None, "--secret", help="Defaults to HASHNODE_WEBHOOK_SECRET"),
) -> None:
    """Check a saved webhook body against its signature."""
    settings: Settings = ctx.obj
    secret = secret or settings.webhook_secret
    if not secret:
        print("✗ No webhook secret given")
        raise typer.Exit(code=1)

    raw_body = payload_file.read_bytes()
    if not verify_signature(raw_body, signature, secret):
        print("✗ Invalid signature")
        raise typer.Exit(code=1)

    try:
        payload = parse_payload(raw_body)
    except WebhookValidationError as e:
        print(f"✗ {e}")
        raise typer.Exit(code=1)

    print("✓ Signature valid")
    print(f"  └─ Event: {payload.event.value}")
    item = payload.post if is_post_event(payload.event) else payload.static_page
    if item:
        print(f"  └─ {item.get('title', '?')} ({item.get('slug', '?')})")


if __name__ == "__main__":
    app()
