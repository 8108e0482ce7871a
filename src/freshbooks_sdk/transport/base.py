import json as jsonlib
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Mapping
from typing import Sequence
from typing import Union

QueryParams = Union[Mapping[str, Any], Sequence[tuple[str, Any]]]


@dataclass(frozen=True)
class TransportResponse:
    """
    Transport-neutral response.

    Every backend reads the body eagerly, so the response stays usable after
    the underlying connection has been released.
    """

    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON. Raises ``ValueError`` on malformed content."""
        return jsonlib.loads(self.content)


class BaseTransport:
    """
    Abstract transport layer interface for FreshBooks SDK.
    All HTTP client backends should inherit from this class.

    Supported transports:
    - httpx: Native async HTTP client
    - aiohttp: Native async HTTP client
    - requests: Sync HTTP client wrapped in async interface
    """

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: QueryParams | None = None,
        json: Any = None,
        data: Any = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """
        Async request method for all transports.
        Override this method in transport implementations.
        """
        raise NotImplementedError(
            "Transport implementations must override this method."
        )

    async def close(self) -> None:
        """Release connections held by the backend."""
