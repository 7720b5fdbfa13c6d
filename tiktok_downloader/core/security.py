import asyncio
import ipaddress
import re
import socket
from enum import Enum, auto
from typing import Optional
from urllib.parse import urlparse

from tiktok_downloader.config.settings import config

TIKTOK_URL_PATTERN = re.compile(r"^(https?://)?(www\.)?(tiktok\.com|vm\.tiktok\.com)/.+")


def is_tiktok_url(candidate: Optional[str]) -> bool:
    """Check a candidate string against the accepted TikTok link pattern"""
    if not candidate:
        return False
    return TIKTOK_URL_PATTERN.match(candidate) is not None


class UrlValidationResult(Enum):
    """URL validation result without throwing exceptions"""
    OK = auto()
    BLOCKED = auto()
    INVALID = auto()


class SecurityValidator:
    """
    Validate relay targets without throwing exceptions.
    Returns result enum for separation of concerns.
    """

    @staticmethod
    async def validate_url(url: str) -> UrlValidationResult:
        """
        Validate a media URL against SSRF attacks.
        Only http(s) URLs with a hostname are accepted; every resolved
        address must be public unless the config allows otherwise.
        """
        try:
            parsed = urlparse(url)
        except ValueError:
            return UrlValidationResult.INVALID

        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            return UrlValidationResult.INVALID

        if not config.security.enable_ssrf_protection:
            return UrlValidationResult.OK

        try:
            addr_info = await asyncio.to_thread(
                socket.getaddrinfo,
                parsed.hostname,
                None
            )
            ips = [info[4][0] for info in addr_info]
        except socket.gaierror:
            # DNS failed - let the fetch itself report it
            return UrlValidationResult.OK

        for ip_str in ips:
            try:
                ip = ipaddress.ip_address(ip_str.split("%", 1)[0])
            except ValueError:
                return UrlValidationResult.INVALID

            if ip.is_loopback:
                if not config.security.allow_localhost:
                    return UrlValidationResult.BLOCKED
                continue

            if not config.security.allow_private_ips and ip.is_private:
                return UrlValidationResult.BLOCKED

            if ip.is_link_local or ip.is_multicast:
                return UrlValidationResult.BLOCKED

        return UrlValidationResult.OK
