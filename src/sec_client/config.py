import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "edgar-sec-client/0.1.0 (admin@example.com)"
DEFAULT_BASE_URL = "https://"
TRANSPORTS = ("async", "threaded")

_TRUTHY = {"1", "true", "yes", "on"}


def get_user_agent():
    """``SEC_USER_AGENT`` if set, else ``DEFAULT_USER_AGENT``.

    EDGAR rejects requests whose User-Agent carries no contact address, so
    deployments should set the variable to their own name and email.
    """
    return os.environ.get("SEC_USER_AGENT", DEFAULT_USER_AGENT)


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request a client makes.

    ``base_url`` replaces the ``https://`` scheme of each SEC URL, so a proxy
    such as ``https://proxy.example/`` receives
    ``https://proxy.example/data.sec.gov/...``. The default leaves URLs
    untouched.
    """

    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_BASE_URL
    rate_limit: int = 10
    rate_period: float = 1.0
    timeout: float = 30.0
    verify_ssl: bool = True
    transport: str = "async"
    show_progress: bool = False

    def __post_init__(self):
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        if self.transport not in TRANSPORTS:
            raise ValueError(f"Unknown transport {self.transport!r}, expected one of {TRANSPORTS}")

    def build_url(self, url: str) -> str:
        if url.startswith("https://"):
            return self.base_url + url[len("https://"):]
        return url

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from ``SEC_*`` environment variables.

        Keyword arguments win over the environment.
        """
        values = {
            "user_agent": get_user_agent(),
            "base_url": os.environ.get("SEC_BASE_URL", DEFAULT_BASE_URL),
            "transport": os.environ.get("SEC_TRANSPORT", "async"),
        }
        if "SEC_RATE_LIMIT" in os.environ:
            values["rate_limit"] = int(os.environ["SEC_RATE_LIMIT"])
        if "SEC_TIMEOUT" in os.environ:
            values["timeout"] = float(os.environ["SEC_TIMEOUT"])
        if os.environ.get("SEC_DISABLE_SSL_VERIFY", "").strip().lower() in _TRUTHY:
            logger.warning("TLS certificate verification is disabled")
            values["verify_ssl"] = False

        values.update(overrides)
        return cls(**values)
