"""Discovery data models: published radar and satellite frames."""

from dataclasses import dataclass, field

DEFAULT_TILE_HOST = "https://tilecache.rainviewer.com"


@dataclass(frozen=True)
class RadarFrame:
    time: int  # unix seconds
    path: str  # e.g. /v2/radar/1609459200


@dataclass(frozen=True)
class AvailableMaps:
    """Frames published by the service at the time of a discovery call.

    `past_radar` runs oldest to newest, `forecast_radar` soonest to furthest.
    Both keep the order of the discovery document.
    """

    past_radar: tuple[RadarFrame, ...]
    forecast_radar: tuple[RadarFrame, ...]
    host: str = DEFAULT_TILE_HOST
    version: str = ""
    generated: int = 0
    infrared_satellite: tuple[RadarFrame, ...] = field(default_factory=tuple)

    @property
    def latest_past(self) -> RadarFrame | None:
        return self.past_radar[-1] if self.past_radar else None
