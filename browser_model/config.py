import os
from dataclasses import dataclass

DEFAULT_KNOWN_SCHEMES = ("http", "https", "ftp", "file", "jar", "mailto")
NETWORK_SCHEMES = ("http", "https", "ftp")
RESOLVERS = ("offline", "webdriver")


@dataclass
class NavigationConfig:
    """Navigation model and resolver configuration."""
    default_scheme: str = "http://"
    headless: bool = True
    known_schemes: tuple[str, ...] = DEFAULT_KNOWN_SCHEMES
    page_load_timeout: float = 10.0
    relative_separator: str = "/"
    resolver: str = "offline"

    def __post_init__(self):
        if not self.default_scheme.endswith("://"):
            raise ValueError("default_scheme must end with '://'")
        if self.default_scheme[:-3].lower() not in self.known_schemes:
            raise ValueError(f"default_scheme {self.default_scheme!r} is not a known scheme")
        if self.page_load_timeout <= 0:
            raise ValueError("page_load_timeout must be positive")
        if self.resolver not in RESOLVERS:
            raise ValueError(f"resolver must be one of {', '.join(RESOLVERS)}")

    @classmethod
    def from_env(cls) -> "NavigationConfig":
        """Create configuration from environment variables."""
        kwargs = {}

        default_scheme = os.environ.get("BROWSER_DEFAULT_SCHEME")
        if default_scheme:
            kwargs["default_scheme"] = default_scheme

        known_schemes = os.environ.get("BROWSER_KNOWN_SCHEMES")
        if known_schemes:
            kwargs["known_schemes"] = tuple(
                scheme.strip().lower() for scheme in known_schemes.split(",") if scheme.strip()
            )

        timeout = os.environ.get("BROWSER_PAGE_LOAD_TIMEOUT")
        if timeout:
            try:
                kwargs["page_load_timeout"] = float(timeout)
            except ValueError:
                raise ValueError(f"BROWSER_PAGE_LOAD_TIMEOUT is not a number: {timeout!r}")

        headless = os.environ.get("BROWSER_HEADLESS")
        if headless:
            kwargs["headless"] = headless.strip().lower() not in ("0", "false", "no", "off")

        resolver = os.environ.get("BROWSER_RESOLVER")
        if resolver:
            kwargs["resolver"] = resolver.strip().lower()

        return cls(**kwargs)
