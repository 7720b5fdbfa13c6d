from dataclasses import dataclass
from typing import Optional
import httpx

@dataclass
class RuntimeState:
    """Process-wide resources shared by all requests"""
    http_client: Optional[httpx.AsyncClient] = None
    active_relays: int = 0

state = RuntimeState()
