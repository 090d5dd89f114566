"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from rainviewer.models.tile import DEFAULT_MAX_ZOOM, ColorKind, TileSize

DISCOVERY_URL = "https://api.rainviewer.com/public/weather-maps.json"
DEFAULT_USER_AGENT = "rainviewer-python/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    discovery_url: str = DISCOVERY_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None disables the transport timeout; callers bound latency themselves
    timeout: float | None = Field(default=None, gt=0.0)


class TileConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_zoom: int = Field(default=DEFAULT_MAX_ZOOM, ge=0, le=30)
    size: TileSize = TileSize.SMALL
    color: ColorKind = ColorKind.UNIVERSAL_BLUE
    smooth: bool = True
    snow: bool = True


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    tiles: TileConfig = TileConfig()
