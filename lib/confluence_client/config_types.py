from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import quote


@dataclass(frozen=True)
class Mimetypes:
    json: tuple[str, ...] = ("application/json", "application/json;charset=utf-8")
    xml: tuple[str, ...] = ("application/xml", "application/xml;charset=utf-8")


DEFAULT_MIMETYPES = Mimetypes()


@dataclass(frozen=True)
class ProxyConfig:
    host: str
    port: int
    user: str | None = None
    password: str | None = None
    scheme: str = "http"

    @property
    def url(self) -> str:
        auth = ""
        if self.user:
            auth = quote(self.user, safe="")
            if self.password:
                auth += ":" + quote(self.password, safe="")
            auth += "@"
        return f"{self.scheme}://{auth}{self.host}:{int(self.port)}"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = ""
    user: str = ""
    password: str = ""
    proxy: ProxyConfig | None = None
    mimetypes: Mimetypes | None = None
    timeout_s: float = 15.0
    read_timeout_s: float | None = None
    keep_alive: bool = True
    verify: bool | str = True
    user_agent: str = "confluence-client/0.1.0"
    extra_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only copy
        object.__setattr__(self, "extra_headers", MappingProxyType(dict(self.extra_headers or {})))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from a plain mapping.

        Accepts both ``base_url`` and ``baseUrl``; ``proxy`` and ``mimetypes`` may
        be nested mappings. Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {k: v for k, v in data.items() if k in known}
        if "baseUrl" in data and not values.get("base_url"):
            values["base_url"] = data["baseUrl"]
        proxy = values.get("proxy")
        if isinstance(proxy, Mapping):
            values["proxy"] = ProxyConfig(
                host=str(proxy.get("host") or ""),
                port=int(proxy.get("port") or 0),
                user=proxy.get("user"),
                password=proxy.get("password"),
                scheme=str(proxy.get("scheme") or "http"),
            )
        mimetypes = values.get("mimetypes")
        if isinstance(mimetypes, Mapping):
            values["mimetypes"] = Mimetypes(
                json=tuple(mimetypes.get("json") or DEFAULT_MIMETYPES.json),
                xml=tuple(mimetypes.get("xml") or DEFAULT_MIMETYPES.xml),
            )
        return cls(**values)
