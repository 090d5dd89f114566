"""Parsing of the RainViewer weather-maps discovery document."""

import json
import logging

from pydantic import BaseModel, ValidationError

from rainviewer.errors import DecodeError
from rainviewer.models.frames import DEFAULT_TILE_HOST, AvailableMaps, RadarFrame

logger = logging.getLogger(__name__)


class _RawFrame(BaseModel):
    time: int
    path: str


class _RawRadar(BaseModel):
    past: list[_RawFrame]
    nowcast: list[_RawFrame] = []


class _RawSatellite(BaseModel):
    infrared: list[_RawFrame] = []


class _RawWeatherMaps(BaseModel):
    version: str = ""
    generated: int = 0
    host: str = DEFAULT_TILE_HOST
    radar: _RawRadar
    satellite: _RawSatellite = _RawSatellite()


def _frames(raw: list[_RawFrame]) -> tuple[RadarFrame, ...]:
    return tuple(RadarFrame(time=f.time, path=f.path) for f in raw)


def parse_weather_maps(body: str | bytes) -> AvailableMaps:
    """Decode a discovery response body into AvailableMaps.

    Raises DecodeError if the body is not JSON or is missing required fields.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Discovery response is not valid JSON: %s", e)
        raise DecodeError(f"Invalid JSON in discovery response: {e}") from e

    try:
        raw = _RawWeatherMaps.model_validate(data)
    except ValidationError as e:
        logger.error("Discovery response has unexpected shape: %s", e)
        raise DecodeError(f"Unexpected discovery response: {e}") from e

    return AvailableMaps(
        past_radar=_frames(raw.radar.past),
        forecast_radar=_frames(raw.radar.nowcast),
        host=raw.host.rstrip("/"),
        version=raw.version,
        generated=raw.generated,
        infrared_satellite=_frames(raw.satellite.infrared),
    )
