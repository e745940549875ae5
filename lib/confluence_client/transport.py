from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, IO, Iterator, Mapping, Union

import httpx

from .config_types import DEFAULT_MIMETYPES, ClientConfig
from .errors import ConfluenceClientError, NetworkError
from .response import NormalizedResult, normalize_response, parse_body
from .routes import JSON_MIMETYPE, Route

logger = logging.getLogger(__name__)

NO_CHECK_HEADER = "X-Atlassian-Token"
NO_CHECK_VALUE = "no-check"

FileInput = Union[str, os.PathLike, bytes, IO[bytes], tuple]


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


def form_fields(fields: Mapping[str, Any] | None) -> dict[str, Any]:
    """Stringify multipart form values; list values become repeated fields."""
    out: dict[str, Any] = {}
    for k, v in (fields or {}).items():
        if v is None:
            continue
        if isinstance(v, (list, tuple)):
            out[k] = [str(item) for item in v if item is not None]
        else:
            out[k] = str(v)
    return out


@contextmanager
def file_part(file: FileInput) -> Iterator[tuple]:
    """Yield an httpx file tuple, opening (and closing) paths on the way."""
    if isinstance(file, (str, os.PathLike)):
        path = os.fspath(file)
        with open(path, "rb") as fh:
            yield os.path.basename(path), fh
        return
    if isinstance(file, tuple):
        yield file
        return
    name = os.path.basename(str(getattr(file, "name", "") or "")) or "upload"
    yield name, file


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._mimetypes = cfg.mimetypes or DEFAULT_MIMETYPES
        headers = {"User-Agent": cfg.user_agent}
        headers.update(cfg.extra_headers)

        read_timeout = cfg.read_timeout_s if cfg.read_timeout_s is not None else cfg.timeout_s
        limits = httpx.Limits() if cfg.keep_alive else httpx.Limits(max_keepalive_connections=0)
        kwargs: dict[str, Any] = {}
        if cfg.proxy is not None:
            kwargs["proxy"] = cfg.proxy.url
        if transport is not None:
            kwargs["transport"] = transport

        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/"),
            auth=(cfg.user, cfg.password),
            timeout=httpx.Timeout(cfg.timeout_s, read=read_timeout),
            headers=headers,
            limits=limits,
            verify=cfg.verify,
            follow_redirects=False,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    def close(self) -> None:
        self._client.close()

    def _headers(self, route: Route, extra: Mapping[str, str] | None) -> dict[str, str]:
        headers = {"Accept": route.accept}
        if route.no_check:
            headers[NO_CHECK_HEADER] = NO_CHECK_VALUE
        if extra:
            headers.update(extra)
        return headers

    def build_request(
            self,
            route: Route,
            *,
            path_params: Mapping[str, Any] | None = None,
            params: Mapping[str, Any] | None = None,
            body: Any = None,
            headers: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        if route.multipart:
            raise ConfluenceClientError(f"route '{route.name}' sends a multipart form, use upload()")
        url = route.resolve(path_params)
        hdrs = self._headers(route, headers)
        kwargs: dict[str, Any] = {}
        if route.body:
            hdrs["Content-Type"] = JSON_MIMETYPE
            kwargs["json"] = {} if body is None else body
        return self._client.build_request(route.method, url, params=clean_params(params), headers=hdrs, **kwargs)

    def send(self, request: httpx.Request) -> NormalizedResult:
        try:
            r = self._client.send(request)
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %s", request.method, request.url, e)
            return normalize_response(NetworkError(str(e) or type(e).__name__))

        logger.debug("%s %s -> %s", request.method, request.url, r.status_code)
        return normalize_response(None, parse_body(r, self._mimetypes), r)

    def execute(self, route: Route, **kwargs: Any) -> NormalizedResult:
        return self.send(self.build_request(route, **kwargs))

    def request(self, route: Route, **kwargs: Any) -> Any:
        return self.execute(route, **kwargs).unwrap()

    def execute_upload(
            self,
            route: Route,
            *,
            file: FileInput,
            fields: Mapping[str, Any] | None = None,
            path_params: Mapping[str, Any] | None = None,
            params: Mapping[str, Any] | None = None,
            headers: Mapping[str, str] | None = None,
    ) -> NormalizedResult:
        if not route.multipart:
            raise ConfluenceClientError(f"route '{route.name}' does not accept a multipart form")
        url = route.resolve(path_params)
        hdrs = self._headers(route, headers)
        hdrs[NO_CHECK_HEADER] = NO_CHECK_VALUE
        data = form_fields(fields)

        # the multipart stream reads the file lazily, so send before it is closed
        with file_part(file) as part:
            request = self._client.build_request(
                route.method,
                url,
                params=clean_params(params),
                headers=hdrs,
                data=data,
                files={"file": part},
            )
            return self.send(request)

    def upload(self, route: Route, **kwargs: Any) -> Any:
        return self.execute_upload(route, **kwargs).unwrap()
