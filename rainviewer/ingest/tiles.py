"""Tile URL construction following the service path grammar."""

from rainviewer.models.frames import DEFAULT_TILE_HOST, RadarFrame
from rainviewer.models.tile import RequestArguments


def build_tile_url(
    frame: RadarFrame, args: RequestArguments, host: str = DEFAULT_TILE_HOST
) -> str:
    """Build `{host}{path}/{size}/{z}/{x}/{y}/{color}/{smooth}_{snow}.png`.

    See https://www.rainviewer.com/api/weather-maps-api.html
    """
    options = f"{int(args.smooth)}_{int(args.snow)}"
    return (
        f"{host.rstrip('/')}{frame.path}/{int(args.size)}/{args.zoom}"
        f"/{args.x}/{args.y}/{int(args.color)}/{options}.png"
    )
