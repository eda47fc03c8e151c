import logging
from datetime import datetime
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its status and processing time"""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:

        request_info = self._get_request_info(request)
        client_info = self._get_client_info(request)

        logger.info(f"INCOMING: {request_info} from {client_info}")

        start_time = datetime.now()

        try:
            response = await call_next(request)
        except Exception as e:
            processing_time = (datetime.now() - start_time).total_seconds()
            logger.error(f"ERROR: {request_info} after {processing_time:.3f}s - {str(e)}")
            raise

        processing_time = (datetime.now() - start_time).total_seconds()
        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"PROCESSED: {request_info} -> {response.status_code} in {processing_time:.3f}s")

        return response

    def _get_client_info(self, request: Request) -> str:
        if request.client:
            return f"{request.client.host}:{request.client.port}"
        return "unknown client"

    def _get_request_info(self, request: Request) -> str:
        path = request.url.path
        if request.url.query:
            query = request.url.query
            query = query[:50] + "..." if len(query) > 50 else query
            path = f"{path}?{query}"
        return f"{request.method} {path}"
