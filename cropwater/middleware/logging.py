"""Structured request logging carrying crop context (crop id, ET₀, day)."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from cropwater.config import LogFormat, get_settings

# Query parameters worth carrying on every log line of a crop request.
LOGGED_QUERY_PARAMS = ("category", "day", "et0", "kc", "step_days")

_configured = False


def configure_structured_logging() -> None:
	"""Configure stdlib + structlog once for the API process."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
	if settings.log_format == LogFormat.json:
		renderer: Any = structlog.processors.JSONRenderer()
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		renderer = structlog.dev.ConsoleRenderer()
		logging.basicConfig(level=log_level)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


def crop_request_context(path: str, query: dict[str, str], api_prefix: str) -> dict[str, str]:
	"""Crop id from ``{prefix}/crops/{crop_id}[/...]`` plus the calculation inputs.

	Path parameters are not resolved until routing, which runs after the
	middleware, so the crop id is read from the raw path.
	"""
	context: dict[str, str] = {}
	crops_root = f"{api_prefix.rstrip('/')}/crops/"
	if path.startswith(crops_root):
		crop_id = path[len(crops_root):].split("/", 1)[0]
		if crop_id and crop_id != "categories":
			context["crop_id"] = crop_id
	for name in LOGGED_QUERY_PARAMS:
		if name in query:
			context[name] = query[name]
	return context


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind request id and crop context, then log one timing event per request."""

	def __init__(self, app: ASGIApp, api_prefix: str = "/api/v1") -> None:
		super().__init__(app)
		self.api_prefix = api_prefix

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
		request.state.request_id = request_id
		context = crop_request_context(request.url.path, dict(request.query_params), self.api_prefix)

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(request_id=request_id, **context)

		logger = structlog.get_logger("cropwater.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception as exc:
			logger.exception(
				"crop_request_failed",
				path=request.url.path,
				duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
				error=str(exc),
				**context,
			)
			raise

		response.headers["x-request-id"] = request_id
		logger.info(
			"crop_request",
			method=request.method,
			path=request.url.path,
			status_code=response.status_code,
			duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
			**context,
		)
		return response
