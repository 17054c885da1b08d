"""Async HTTP client for the Bitstore service.

A thin wrapper over :class:`httpx.AsyncClient` that groups the service's
endpoints into namespaces mirroring the CLI::

    async with BitstoreClient(private_key=key, host=host, network="livenet") as client:
        await client.files.index()
        await client.billing.plan.set("pro")

Every operation issues exactly one request.  Non-2xx responses raise
:class:`httpx.HTTPStatusError`, which carries the response for the
renderer.  Request signing is not done here: authentication goes through an
:class:`httpx.Auth` hook, :class:`CredentialAuth` unless one is supplied.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
import structlog

if TYPE_CHECKING:
    from bitstore.config.settings import BitstoreSettings

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class CredentialAuth(httpx.Auth):
    """Attach the configured credential and network to every request."""

    def __init__(self, private_key: str, network: str) -> None:
        self._private_key = private_key
        self._network = network

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["X-Bitstore-Key"] = self._private_key
        request.headers["X-Bitstore-Network"] = self._network
        yield request


def path_segment(value: str) -> str:
    """Percent-encode *value* as a single URL path segment.

    Dot segments are encoded too; httpx would otherwise resolve them away.
    """
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON when declared, text otherwise, None when empty."""
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class _Namespace:
    def __init__(self, client: BitstoreClient) -> None:
        self._client = client


class FilesAPI(_Namespace):
    async def index(self) -> Any:
        return await self._client.request("GET", "/files")

    async def put(self, file_path: str) -> Any:
        """Upload a local file, or ask the service to fetch a remote URL."""
        if file_path.startswith(("http://", "https://")):
            return await self._client.request("POST", "/files", json={"remoteURL": file_path})
        path = Path(file_path).expanduser()
        with path.open("rb") as fh:
            return await self._client.request("POST", "/files", files={"file": (path.name, fh)})

    async def meta(self, sha1: str) -> Any:
        return await self._client.request("GET", f"/files/{path_segment(sha1)}/meta")

    async def torrent(self, sha1: str, *, json: bool = False) -> Any:
        """Fetch the torrent for *sha1*; ``json=True`` requests the decoded form."""
        suffix = ".json" if json else ""
        return await self._client.request("GET", f"/files/{path_segment(sha1)}/torrent{suffix}")

    async def destroy(self, sha1: str) -> Any:
        return await self._client.request("DELETE", f"/files/{path_segment(sha1)}")


class WalletAPI(_Namespace):
    async def get(self) -> Any:
        return await self._client.request("GET", "/wallet")

    async def deposit(self) -> Any:
        return await self._client.request("POST", "/wallet/deposit")

    async def withdraw(self, amount: str, address: str) -> Any:
        return await self._client.request(
            "POST", "/wallet/withdraw", json={"amount": amount, "address": address}
        )


class TransactionsAPI(_Namespace):
    async def index(self) -> Any:
        return await self._client.request("GET", "/transactions")


class KeysAPI(_Namespace):
    """Key/value store. The service operation ``del`` is exposed as :meth:`delete`."""

    async def put(self, key: str, value: str) -> Any:
        return await self._client.request(
            "PUT", f"/keys/{path_segment(key)}", json={"value": value}
        )

    async def get(self, key: str) -> Any:
        return await self._client.request("GET", f"/keys/{path_segment(key)}")

    async def delete(self, key: str) -> Any:
        return await self._client.request("DELETE", f"/keys/{path_segment(key)}")


class PaymentAPI(_Namespace):
    async def get(self) -> Any:
        return await self._client.request("GET", "/billing/payment")

    async def set(self, card: dict[str, Any]) -> Any:
        """Set the billing card. Keys whose value is None are not sent."""
        body = {key: value for key, value in card.items() if value is not None}
        return await self._client.request("PUT", "/billing/payment", json=body)


class PlanAPI(_Namespace):
    async def get(self) -> Any:
        return await self._client.request("GET", "/billing/plan")

    async def set(self, plan: str) -> Any:
        return await self._client.request("PUT", "/billing/plan", json={"plan": plan})


class BillingAPI(_Namespace):
    def __init__(self, client: BitstoreClient) -> None:
        super().__init__(client)
        self.payment = PaymentAPI(client)
        self.plan = PlanAPI(client)


class BitstoreClient:
    """
    HTTP client for the Bitstore API.

    Usage:
        async with BitstoreClient(private_key="...", host="https://...") as client:
            files = await client.files.index()
    """

    def __init__(
        self,
        *,
        private_key: str,
        host: str,
        network: str = "livenet",
        timeout: float = DEFAULT_TIMEOUT,
        auth: httpx.Auth | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            private_key: Credential handed to the auth hook.
            host: Service base URL.
            network: ``livenet`` or ``testnet``.
            timeout: Request timeout in seconds.
            auth: Replaces :class:`CredentialAuth` (e.g. a request signer).
            transport: Custom httpx transport, mainly for tests.
        """
        self.host = host.rstrip("/")
        self.network = network
        self._http = httpx.AsyncClient(
            base_url=self.host,
            timeout=timeout,
            auth=auth or CredentialAuth(private_key, network),
            transport=transport,
        )

        self.files = FilesAPI(self)
        self.wallet = WalletAPI(self)
        self.transactions = TransactionsAPI(self)
        self.keys = KeysAPI(self)
        self.billing = BillingAPI(self)

    async def __aenter__(self) -> BitstoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def status(self) -> Any:
        return await self.request("GET", "/status")

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send one request and return the decoded body.

        Raises:
            httpx.HTTPStatusError: The service answered with a non-2xx status.
            httpx.RequestError: The request never got a response.
        """
        log = logger.bind(method=method, path=path, network=self.network)
        log.debug("API request")
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            log.error("API request failed", error=str(exc))
            raise

        log.debug("API response", status_code=response.status_code)
        response.raise_for_status()
        return decode_body(response)


def create_client(settings: BitstoreSettings, **kwargs: Any) -> BitstoreClient:
    """Build a client from validated settings.

    Only marshals the credential, host and network; validation happened
    when the settings were loaded.
    """
    return BitstoreClient(
        private_key=settings.require_private_key(),
        host=settings.host or "",
        network=str(settings.network),
        **kwargs,
    )
