"""HTTP utilities for the RPC Optimizer."""

import json
from typing import Any, Dict, Optional

import httpx

from rpc_optimizer.const import CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON


class HTTPX_Util:

    @staticmethod
    def build_timeout(timeout_ms: float) -> httpx.Timeout:
        """Build an httpx timeout applying the same deadline to every phase."""
        seconds = timeout_ms / 1000
        return httpx.Timeout(
            connect=seconds,
            read=seconds,
            write=seconds,
            pool=seconds
        )

    @staticmethod
    def create_async_client(timeout_ms: float, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
        """Create an async client; a transport can be injected for tests."""
        return httpx.AsyncClient(timeout=HTTPX_Util.build_timeout(timeout_ms), transport=transport)

    @staticmethod
    def encode_json_body(payload: Dict[str, Any]) -> bytes:
        """Serialise a payload compactly, keeping key order."""
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")

    @staticmethod
    def json_headers() -> Dict[str, str]:
        return {CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON}

    @staticmethod
    def describe_error(error: BaseException) -> str:
        """Human readable message for a transport failure."""
        message = str(error)
        return message if message else type(error).__name__
