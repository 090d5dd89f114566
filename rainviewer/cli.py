"""CLI entry point for the RainViewer client."""

import argparse
import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from rainviewer.client import RainViewerClient
from rainviewer.config.loader import load_config
from rainviewer.config.schema import ClientConfig
from rainviewer.errors import RainViewerError
from rainviewer.models.frames import RadarFrame
from rainviewer.models.tile import ColorKind, RequestArguments

DEFAULT_CONFIG = "rainviewer.yaml"
PNG_MAGIC = b"\x89PNG"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rainviewer",
        description="RainViewer radar frame discovery and tile download",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # frames
    sub.add_parser("frames", help="List published radar and satellite frames")

    # tile
    tile_p = sub.add_parser("tile", help="Download one radar tile")
    tile_p.add_argument("x", type=int)
    tile_p.add_argument("y", type=int)
    tile_p.add_argument("zoom", type=int)
    tile_p.add_argument(
        "--frame", type=int, default=-1,
        help="Index into past radar frames (default: latest)",
    )
    tile_p.add_argument(
        "--color", choices=[c.name.lower() for c in ColorKind], default=None
    )
    tile_p.add_argument("--size", type=int, choices=[256, 512], default=None)
    tile_p.add_argument(
        "--smooth", action=argparse.BooleanOptionalAction, default=None
    )
    tile_p.add_argument(
        "--snow", action=argparse.BooleanOptionalAction, default=None
    )
    tile_p.add_argument("--out", default=None, help="Output PNG path")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (yaml.YAMLError, ValidationError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    try:
        if args.command == "frames":
            return asyncio.run(_cmd_frames(config))
        elif args.command == "tile":
            return asyncio.run(_cmd_tile(config, args))
        elif args.command == "config":
            return _cmd_config(config, args)
    except RainViewerError as e:
        print(f"Error: {e}")
        return 1
    parser.print_help()
    return 1


def _format_frame(frame: RadarFrame) -> str:
    ts = datetime.fromtimestamp(frame.time, UTC).strftime("%Y-%m-%d %H:%M UTC")
    return f"  {ts}  {frame.path}"


async def _cmd_frames(config: ClientConfig) -> int:
    client = RainViewerClient.from_config(config)
    maps = await client.available()
    print(f"Host: {maps.host} | Version: {maps.version}")
    sections = [
        ("Past radar", maps.past_radar),
        ("Forecast radar", maps.forecast_radar),
        ("Infrared satellite", maps.infrared_satellite),
    ]
    for title, frames in sections:
        print(f"{title}: {len(frames)}")
        for frame in frames:
            print(_format_frame(frame))
    return 0


async def _cmd_tile(config: ClientConfig, args) -> int:
    tiles = config.tiles
    request = RequestArguments.new_tile(
        args.x, args.y, args.zoom, max_zoom=tiles.max_zoom
    )
    request.set_size(args.size if args.size is not None else tiles.size)
    request.set_color(
        ColorKind[args.color.upper()] if args.color else tiles.color
    )
    request.set_smooth(tiles.smooth if args.smooth is None else args.smooth)
    request.set_snow(tiles.snow if args.snow is None else args.snow)

    client = RainViewerClient.from_config(config)
    maps = await client.available()
    if not maps.past_radar:
        print("Error: no past radar frames published")
        return 1
    try:
        frame = maps.past_radar[args.frame]
    except IndexError:
        print(f"Error: frame index {args.frame} out of range ({len(maps.past_radar)} frames)")
        return 1

    data = await client.get_tile(maps, frame, request)
    if not data.startswith(PNG_MAGIC):
        logger.warning("Tile body does not start with PNG magic bytes")

    out = Path(args.out or f"tile_{frame.time}_{args.zoom}_{args.x}_{args.y}.png")
    out.write_bytes(data)
    print(f"Wrote {len(data)} bytes to {out}")
    return 0


def _cmd_config(config: ClientConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
