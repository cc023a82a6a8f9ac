"""Static token metadata used to decorate price table entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PRICES_URL = "https://interview.switcheo.com/prices.json"
TOKEN_ICONS_BASE = "https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens"
TOKEN_ICON_EXTENSION = ".svg"

TOKEN_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "SWTH": "Switcheo",
        "USD": "US Dollar",
        "BTC": "Bitcoin",
        "ETH": "Ethereum",
        "USDC": "USD Coin",
        "USDT": "Tether",
        "BUSD": "Binance USD",
        "LUNA": "Terra Luna",
        "ATOM": "Cosmos",
        "BNB": "Binance Coin",
        "SOL": "Solana",
        "MATIC": "Polygon",
        "ADA": "Cardano",
        "DOT": "Polkadot",
        "AVAX": "Avalanche",
        "LINK": "Chainlink",
        "UNI": "Uniswap",
        "AAVE": "Aave",
        "CRV": "Curve",
        "SUSHI": "SushiSwap",
        "WBTC": "Wrapped Bitcoin",
        "GMX": "GMX",
        "BLUR": "Blur",
        "OSMO": "Osmosis",
        "OKB": "OKB",
        "OKT": "OKT Chain",
        "ZIL": "Zilliqa",
        "EVMOS": "Evmos",
        "KUJI": "Kujira",
        "IRIS": "IRISnet",
        "IBCX": "IBCX",
        "STRD": "Stride",
        "USC": "USC",
        "LSI": "Liquid Staking Index",
    }
)

# feed symbols whose icon file uses a different casing
TOKEN_ICON_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "STATOM": "stATOM",
        "STLUNA": "stLUNA",
        "STOSMO": "stOSMO",
        "RATOM": "rATOM",
        "RSWTH": "rSWTH",
        "STEVMOS": "stEVMOS",
        "AMPLUNA": "ampLUNA",
        "BNEO": "bNEO",
        "AXLUSDC": "axlUSDC",
        "WSTETH": "wstETH",
        "YIELDUSDC": "YieldUSD",
    }
)


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class TokenCatalog:
    """Immutable symbol to display-name and symbol to icon-file lookups."""

    names: Mapping[str, str] = field(default_factory=lambda: TOKEN_NAMES)
    icons: Mapping[str, str] = field(default_factory=lambda: TOKEN_ICON_OVERRIDES)
    icon_base_url: str = TOKEN_ICONS_BASE
    icon_extension: str = TOKEN_ICON_EXTENSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", _freeze(self.names))
        object.__setattr__(self, "icons", _freeze(self.icons))
        object.__setattr__(self, "icon_base_url", self.icon_base_url.rstrip("/"))

    def display_name(self, symbol: str) -> str:
        return self.names.get(symbol) or symbol

    def icon_filename(self, symbol: str) -> str:
        return self.icons.get(symbol) or symbol

    def icon_ref(self, symbol: str) -> str:
        return f"{self.icon_base_url}/{self.icon_filename(symbol)}{self.icon_extension}"

    def extend(
        self,
        names: Mapping[str, str] | None = None,
        icons: Mapping[str, str] | None = None,
    ) -> TokenCatalog:
        """Return a new catalog with ``names``/``icons`` layered over this one."""

        return TokenCatalog(
            names={**self.names, **(names or {})},
            icons={**self.icons, **(icons or {})},
            icon_base_url=self.icon_base_url,
            icon_extension=self.icon_extension,
        )


DEFAULT_CATALOG = TokenCatalog()


__all__ = [
    "DEFAULT_CATALOG",
    "PRICES_URL",
    "TOKEN_ICONS_BASE",
    "TOKEN_ICON_EXTENSION",
    "TOKEN_ICON_OVERRIDES",
    "TOKEN_NAMES",
    "TokenCatalog",
]
