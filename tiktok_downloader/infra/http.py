from typing import Optional
import httpx
from rich.console import Console
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.state import state

console = Console()

async def init_http_client() -> httpx.AsyncClient:
    """Create the shared upstream HTTP client"""
    client = httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(config.resolver.timeout_seconds)
    )
    state.http_client = client
    console.print("[green]✓ HTTP client ready[/green]")
    return client

def get_http_client() -> httpx.AsyncClient:
    """FastAPI dependency returning the shared client, created lazily if startup did not run"""
    if state.http_client is None or state.http_client.is_closed:
        state.http_client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=httpx.Timeout(config.resolver.timeout_seconds)
        )
    return state.http_client

async def close_http_client() -> None:
    """Close the shared client"""
    client: Optional[httpx.AsyncClient] = state.http_client
    if client is not None:
        await client.aclose()
        state.http_client = None
        console.print("[dim]✓ HTTP client closed[/dim]")
