"""Tile request arguments and the service's closed option domains."""

from enum import IntEnum

from rainviewer.errors import InvalidCoordinate, InvalidSize, ParameterError

DEFAULT_MAX_ZOOM = 20


class ColorKind(IntEnum):
    """Color schemes, valued by service palette id.

    See https://www.rainviewer.com/api/color-schemes.html
    """

    BLACK_AND_WHITE = 0
    ORIGINAL = 1
    UNIVERSAL_BLUE = 2
    TITAN = 3
    THE_WEATHER_CHANNEL = 4
    METEORED = 5
    NEXRAD_LEVEL_III = 6
    RAINBOW_SELEX_IS = 7
    DARK_SKY = 8


class TileSize(IntEnum):
    SMALL = 256
    LARGE = 512


def _check_flag(name: str, value: bool) -> bool:
    if not isinstance(value, bool):
        raise ParameterError(f"{name} must be a bool, got {value!r}")
    return value


class RequestArguments:
    """Options for a single radar tile request.

    Build with `new_tile`, which validates the coordinate, then adjust the
    rendering options with the setters. Setters return `self` so calls can
    be chained.
    """

    def __init__(
        self,
        x: int,
        y: int,
        zoom: int,
        size: TileSize = TileSize.SMALL,
        color: ColorKind = ColorKind.UNIVERSAL_BLUE,
        smooth: bool = True,
        snow: bool = True,
    ):
        self.x = x
        self.y = y
        self.zoom = zoom
        self.size = size
        self.color = color
        self.smooth = smooth
        self.snow = snow

    @classmethod
    def new_tile(
        cls, x: int, y: int, zoom: int, *, max_zoom: int = DEFAULT_MAX_ZOOM
    ) -> "RequestArguments":
        """Create arguments for one tile; `x` and `y` must be below `2**zoom`."""
        for field, value in (("x", x), ("y", y), ("zoom", zoom)):
            # bool is an int subclass but never a coordinate
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidCoordinate(field, value, "must be an integer")
        if zoom < 0 or zoom > max_zoom:
            raise InvalidCoordinate(
                "zoom", zoom, f"zoom must be between 0 and {max_zoom}"
            )
        max_coord = 2**zoom
        if x < 0 or x >= max_coord:
            raise InvalidCoordinate(
                "x", x,
                f"With a zoom of {zoom}, the max value for x is {max_coord - 1}",
            )
        if y < 0 or y >= max_coord:
            raise InvalidCoordinate(
                "y", y,
                f"With a zoom of {zoom}, the max value for y is {max_coord - 1}",
            )
        return cls(x, y, zoom)

    def set_size(self, size: int) -> "RequestArguments":
        try:
            self.size = TileSize(size)
        except ValueError as e:
            raise InvalidSize(size) from e
        return self

    def set_smooth(self, smooth: bool) -> "RequestArguments":
        self.smooth = _check_flag("smooth", smooth)
        return self

    def set_snow(self, snow: bool) -> "RequestArguments":
        self.snow = _check_flag("snow", snow)
        return self

    def set_color(self, color: ColorKind) -> "RequestArguments":
        self.color = ColorKind(color)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestArguments):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return (
            f"RequestArguments(x={self.x}, y={self.y}, zoom={self.zoom}, "
            f"size={int(self.size)}, color={self.color.name}, "
            f"smooth={self.smooth}, snow={self.snow})"
        )
