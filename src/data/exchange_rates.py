"""Exchange rate client and per-session rate provider.

The client performs a single request against an ExchangeRate-API compatible
service and raises on any failure. The provider owns the in-memory table for
the currently selected base currency, swallows fetch failures, and discards
responses that arrive for a base currency the caller has since moved away
from.
"""

import logging
from decimal import Decimal, InvalidOperation

import httpx

from src.config import settings
from src.models.rates import ExchangeRateTable

logger = logging.getLogger(__name__)


class RateFetchError(Exception):
    """Network, HTTP status, or payload problem while fetching rates."""


class ExchangeRateClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.exchange_rate_api_key
        self.base_url = (base_url or settings.exchange_rate_api_url).rstrip("/")
        self.timeout = timeout or settings.exchange_rate_timeout_seconds
        self._transport = transport

    def latest_url(self, base_currency: str) -> str:
        return f"{self.base_url}/{self.api_key}/latest/{base_currency.upper()}"

    async def fetch_rates(self, base_currency: str) -> ExchangeRateTable:
        """Fetch the latest table for ``base_currency``.

        Raises:
            RateFetchError: on transport errors, non-2xx status, or a body
                without a usable ``conversion_rates`` object.
        """
        base = base_currency.upper()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.latest_url(base))
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise RateFetchError(f"rate service returned {e.response.status_code} for {base}") from e
        except httpx.HTTPError as e:
            raise RateFetchError(f"rate service request failed for {base}: {e}") from e
        except ValueError as e:  # JSON decode
            raise RateFetchError(f"rate service returned invalid JSON for {base}") from e

        return ExchangeRateTable(base_currency=base, rates=_parse_rates(data, base))


def _parse_rates(data: object, base: str) -> dict[str, Decimal]:
    if not isinstance(data, dict):
        raise RateFetchError(f"unexpected payload type for {base}: {type(data).__name__}")
    if data.get("result") == "error":
        raise RateFetchError(f"rate service error for {base}: {data.get('error-type', 'unknown')}")

    raw = data.get("conversion_rates")
    if not isinstance(raw, dict) or not raw:
        raise RateFetchError(f"missing conversion_rates for {base}")

    rates: dict[str, Decimal] = {}
    for code, value in raw.items():
        if isinstance(value, bool):
            continue
        try:
            rate = Decimal(str(value))
        except (InvalidOperation, ValueError):
            logger.debug("Skipping non-numeric rate %s=%r", code, value)
            continue
        if rate.is_finite() and rate > 0:
            rates[str(code).upper()] = rate

    if not rates:
        raise RateFetchError(f"no usable conversion_rates for {base}")
    rates.setdefault(base, Decimal("1"))
    return rates


class RateProvider:
    """Rate table cache for one display session.

    A fetch is issued whenever the selected base currency changes. Each fetch
    takes a generation token; only the fetch holding the latest token may
    replace the table. Failures leave the table untouched (empty until the
    first success).
    """

    def __init__(self, client: ExchangeRateClient | None = None, base_currency: str | None = None):
        self._client = client or ExchangeRateClient()
        self._base_currency = (base_currency or settings.base_currency).upper()
        self._table = ExchangeRateTable(base_currency=self._base_currency)
        self._generation = 0
        self.last_error: str | None = None

    @property
    def base_currency(self) -> str:
        return self._base_currency

    @property
    def table(self) -> ExchangeRateTable:
        return self._table

    @property
    def is_current(self) -> bool:
        """Table holds rates for the selected base currency."""
        return self._table.base_currency == self._base_currency and not self._table.is_empty

    def rate_for(self, currency: str) -> Decimal | None:
        if not self.is_current:
            return None
        return self._table.get(currency)

    async def select_base_currency(self, base_currency: str) -> ExchangeRateTable:
        """Select a base currency, fetching its table unless already loaded.

        Never raises for fetch failures; returns whatever table is held after
        the attempt.
        """
        base = base_currency.upper()
        if base == self._base_currency and self.is_current:
            return self._table

        self._base_currency = base
        self._generation += 1
        token = self._generation

        try:
            table = await self._client.fetch_rates(base)
        except RateFetchError as e:
            if token == self._generation:
                self.last_error = str(e)
            logger.warning("Exchange rate fetch failed for %s: %s", base, e)
            return self._table

        if token != self._generation:
            logger.debug("Discarding stale %s rates (request %d, current %d)", base, token, self._generation)
            return self._table

        self._table = table
        self.last_error = None
        logger.info("Loaded %d exchange rates for base %s", len(table.rates), base)
        return table


class RateProviderPool:
    """One ``RateProvider`` per base currency over a shared client.

    Requests pinned to different bases never share a generation counter, so a
    fetch for one base cannot mark another base's in-flight fetch as stale.
    """

    def __init__(self, client: ExchangeRateClient | None = None):
        self._client = client or ExchangeRateClient()
        self._providers: dict[str, RateProvider] = {}

    def for_base(self, base_currency: str) -> RateProvider:
        base = base_currency.upper()
        provider = self._providers.get(base)
        if provider is None:
            provider = RateProvider(self._client, base_currency=base)
            self._providers[base] = provider
        return provider
