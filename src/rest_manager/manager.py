"""Caller-facing request builder and asynchronous executor."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable

from .body import get_http_body
from .entity import RestEntity
from .errors import RequestCreationFailed
from .logger import BoundLogger, LogLevel, create_logger
from .request import RequestDescriptor, build_request
from .transport import HttpTransport, Transport
from .types import HttpMethod, Response, Results
from .url import add_url_query_parameters

Completion = Callable[[Results], Any]


@dataclass
class ManagerOptions:
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"
    max_workers: int = 4


class RestManager:
    """Accumulates headers and parameters, then issues requests from them.

    The three stores and ``http_body`` are only read by :meth:`execute`, so one
    manager can serve as a reusable request template. Mutating them while a
    request is in flight is the caller's responsibility to avoid.
    """

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
        max_workers: int = 4,
    ) -> None:
        options = ManagerOptions(
            transport=transport,
            logger=logger,
            log_level=log_level,
            max_workers=max_workers,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpTransport(logger=self._logger)
        self._max_workers = options.max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._worker_state = threading.local()

        self.request_http_headers = RestEntity()
        self.url_query_parameters = RestEntity()
        self.http_body_parameters = RestEntity()
        self.http_body: bytes | None = None

    def execute(
        self,
        url: str,
        method: HttpMethod,
        completion: Completion | None = None,
    ) -> Future[Results]:
        """Perform the request on a worker thread.

        ``completion`` is called exactly once, from the worker thread, with the
        :class:`Results`. The returned future resolves to the same value once
        the callback has returned.
        """
        return self._get_executor().submit(self._run, url, method, completion)

    def perform(self, url: str, method: HttpMethod) -> Results:
        """Run the whole pipeline on the calling thread."""
        target = add_url_query_parameters(url, self.url_query_parameters) if url else url
        body = get_http_body(
            self.request_http_headers,
            self.http_body_parameters,
            self.http_body,
            logger=self._logger,
        )
        try:
            request = build_request(target, method, self.request_http_headers, body)
        except RequestCreationFailed as exc:
            self._logger.debug("Request creation failed for %r", url)
            return Results.from_error(exc)
        return self._dispatch(request)

    def close(self) -> None:
        """Shut down the worker pool.

        Called from a completion callback, the pool is released without
        waiting, since the calling worker cannot join itself.
        """
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=not getattr(self._worker_state, "active", False))

    def __enter__(self) -> "RestManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _dispatch(self, request: RequestDescriptor) -> Results:
        try:
            outcome = self._transport.send(request)
        except Exception as exc:
            # Custom transports may raise instead of reporting; pass it on as-is
            self._logger.debug("Transport raised for %s %s: %r", request.method.value, request.url, exc)
            return Results(response=Response.from_raw(None), error=exc)

        response = Response.from_raw(outcome.response)
        self._logger.trace(
            "%s %s -> status=%d error=%r",
            request.method.value,
            request.url,
            response.http_status_code,
            outcome.error,
        )
        return Results(data=outcome.data, response=response, error=outcome.error)

    def _run(self, url: str, method: HttpMethod, completion: Completion | None) -> Results:
        self._worker_state.active = True
        try:
            results = self.perform(url, method)
        except Exception as exc:
            results = Results.from_error(exc)
        if completion is not None:
            try:
                completion(results)
            except Exception:
                self._logger.error("Completion callback raised for %s %s", method, url)
                raise
        return results

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="rest-manager",
            )
        return self._executor


__all__ = ["Completion", "ManagerOptions", "RestManager"]
