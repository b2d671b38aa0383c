import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
	async def dispatch(self, request, call_next):
		cid = request.headers.get('x-correlation-id') or f"fr-{uuid.uuid4()}"
		request.state.correlation_id = cid
		started = time.perf_counter()
		response = await call_next(request)
		elapsed_ms = (time.perf_counter() - started) * 1000
		response.headers['x-correlation-id'] = cid
		logger.info(f"{request.method} {request.url.path} → {response.status_code} ({elapsed_ms:.1f}ms) [{cid}]")
		return response
