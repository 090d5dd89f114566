"""Async RainViewer API client: frame discovery and tile download."""

import logging

import httpx

from rainviewer.config.schema import DEFAULT_USER_AGENT, DISCOVERY_URL, ClientConfig
from rainviewer.errors import TransportError, UnexpectedStatus
from rainviewer.ingest.discovery import parse_weather_maps
from rainviewer.ingest.tiles import build_tile_url
from rainviewer.models.frames import AvailableMaps, RadarFrame
from rainviewer.models.tile import RequestArguments

logger = logging.getLogger(__name__)


class RainViewerClient:
    """Thin async wrapper around the RainViewer public API.

    Every call opens its own connection and closes it when the call returns,
    fails or is cancelled. Nothing is cached and nothing is retried.
    """

    def __init__(
        self,
        discovery_url: str = DISCOVERY_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.discovery_url = discovery_url
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ClientConfig) -> "RainViewerClient":
        return cls(
            discovery_url=config.api.discovery_url,
            user_agent=config.api.user_agent,
            timeout=config.api.timeout,
        )

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("Requesting %s", url)
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, headers=headers, follow_redirects=True
            ) as client:
                resp = await client.get(url)
        except httpx.RequestError as e:
            logger.error("RainViewer request failed: %s -> %s", url, e)
            raise TransportError(f"Request failed: {e}", url) from e
        if not resp.is_success:
            logger.error("RainViewer API %d: %s", resp.status_code, url)
            raise UnexpectedStatus(resp.status_code, url)
        return resp

    async def available(self) -> AvailableMaps:
        """Query which radar and satellite frames are currently published.

        Serves as the entry point so the caller has the host, path and time
        information needed by `get_tile`.
        """
        resp = await self._get(self.discovery_url)
        maps = parse_weather_maps(resp.content)
        logger.debug(
            "Discovered %d past and %d forecast radar frames",
            len(maps.past_radar), len(maps.forecast_radar),
        )
        return maps

    def tile_url(
        self, maps: AvailableMaps, frame: RadarFrame, args: RequestArguments
    ) -> str:
        return build_tile_url(frame, args, host=maps.host)

    async def get_tile(
        self, maps: AvailableMaps, frame: RadarFrame, args: RequestArguments
    ) -> bytes:
        """Download a single tile and return the body verbatim.

        Args:
            maps: Result of `available`, supplies the tile host.
            frame: The moment in time to pull from.
            args: Tile coordinate and rendering options.
        """
        resp = await self._get(self.tile_url(maps, frame, args))
        return resp.content


_default_client = RainViewerClient()


async def available() -> AvailableMaps:
    return await _default_client.available()


async def get_tile(
    maps: AvailableMaps, frame: RadarFrame, args: RequestArguments
) -> bytes:
    return await _default_client.get_tile(maps, frame, args)
