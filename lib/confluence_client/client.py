from __future__ import annotations

import dataclasses
from typing import Any, Iterator, Mapping

import httpx

from .config_types import DEFAULT_MIMETYPES, ClientConfig
from .errors import ConfigurationError
from .resources import (
    Audit,
    Content,
    ContentBody,
    Group,
    LongTask,
    Relation,
    Resource,
    Search,
    Settings,
    Space,
    Template,
    User,
)
from .routes import Route
from .transport import Transport

CONFIG_MISSING = "Confluence client expects a config object."
CREDENTIALS_MISSING = "Confluence client expects a config object with both a user and password."
BASE_URL_MISSING = "Confluence client expects a config object with a baseUrl."


def validate_config(cfg: ClientConfig | Mapping[str, Any] | None) -> ClientConfig:
    if isinstance(cfg, Mapping):
        cfg = ClientConfig.from_mapping(cfg)
    if not isinstance(cfg, ClientConfig):
        raise ConfigurationError(CONFIG_MISSING)
    if not cfg.user or not cfg.password:
        raise ConfigurationError(CREDENTIALS_MISSING)
    if not cfg.base_url:
        raise ConfigurationError(BASE_URL_MISSING)
    if cfg.mimetypes is None:
        cfg = dataclasses.replace(cfg, mimetypes=DEFAULT_MIMETYPES)
    return cfg


class ConfluenceClient:
    def __init__(self, cfg: ClientConfig | Mapping[str, Any] | None, *, transport: httpx.BaseTransport | None = None):
        self._cfg = validate_config(cfg)
        self._t = Transport(self._cfg, transport=transport)

        self.audit = Audit(self._t)
        self.content = Content(self._t)
        self.contentbody = ContentBody(self._t)
        self.group = Group(self._t)
        self.longtask = LongTask(self._t)
        self.relation = Relation(self._t)
        self.search = Search(self._t)
        self.settings = Settings(self._t)
        self.space = Space(self._t)
        self.template = Template(self._t)
        self.user = User(self._t)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def base_url(self) -> str:
        return self._cfg.base_url.rstrip("/")

    def resources(self) -> Iterator[Resource]:
        yield from (
            self.audit,
            self.content,
            self.contentbody,
            self.group,
            self.longtask,
            self.relation,
            self.search,
            self.settings,
            self.space,
            self.template,
            self.user,
        )

    def resource(self, name: str) -> Resource:
        for res in self.resources():
            if res.name == name:
                return res
        raise KeyError(f"unknown resource '{name}'")

    def route_table(self) -> dict[str, Route]:
        return {f"{res.name}.{name}": route for res in self.resources() for name, route in res.routes.items()}

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "ConfluenceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_client(
        cfg: ClientConfig | Mapping[str, Any] | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        **options: Any,
) -> ConfluenceClient:
    """Build a client from a ClientConfig, a plain mapping or keyword options.

    ``create_client({"user": "a", "password": "b", "baseUrl": "https://x/wiki/rest/api"})``
    and ``create_client(user="a", password="b", base_url="...")`` are equivalent.
    """
    if isinstance(cfg, ClientConfig):
        if options:
            cfg = dataclasses.replace(cfg, **options)
    elif isinstance(cfg, Mapping):
        cfg = ClientConfig.from_mapping({**cfg, **options})
    elif options:
        cfg = ClientConfig.from_mapping(options)
    return ConfluenceClient(cfg, transport=transport)
