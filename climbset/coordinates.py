"""Conversion between container pixels and wall-relative percentages.

Hold positions are stored as percentages of the wall image so that the
same hold set renders correctly at any display resolution. These helpers
translate pointer positions into that space and back.

Example:
    >>> to_percentage(200, 150, 800, 600)
    Point(x=25.0, y=25.0)
    >>> to_pixels(25.0, 25.0, 800, 600)
    Point(x=200.0, y=150.0)
"""

from typing import NamedTuple

from climbset.exceptions import CoordinateMappingError


class Point(NamedTuple):
    """A 2D point in either pixel or percentage space."""

    x: float
    y: float


def _validate_container(container_width: float, container_height: float) -> None:
    """Ensure container dimensions are known before mapping.

    Raises:
        CoordinateMappingError: If either dimension is not positive.
    """
    if container_width <= 0:
        raise CoordinateMappingError(
            f"Container width must be positive, got {container_width}"
        )
    if container_height <= 0:
        raise CoordinateMappingError(
            f"Container height must be positive, got {container_height}"
        )


def to_percentage(
    pixel_x: float,
    pixel_y: float,
    container_width: float,
    container_height: float,
) -> Point:
    """Convert pixel coordinates to percentages of the container.

    Args:
        pixel_x: Horizontal offset from the container's left edge.
        pixel_y: Vertical offset from the container's top edge.
        container_width: Rendered container width in pixels.
        container_height: Rendered container height in pixels.

    Returns:
        Point with x and y in percentage units.

    Raises:
        CoordinateMappingError: If the container has no layout yet.
    """
    _validate_container(container_width, container_height)
    return Point(
        x=(pixel_x / container_width) * 100,
        y=(pixel_y / container_height) * 100,
    )


def clamp_percentage(point: Point) -> Point:
    """Pin a percentage point to the wall, i.e. both axes into [0, 100].

    Pointer events can land slightly outside the rendered image (drag
    release past the edge, borders). Holds must stay on the wall.
    """
    return Point(x=min(max(point.x, 0.0), 100.0), y=min(max(point.y, 0.0), 100.0))


def to_pixels(
    percent_x: float,
    percent_y: float,
    container_width: float,
    container_height: float,
) -> Point:
    """Convert percentage coordinates to pixels of the container.

    Inverse of :func:`to_percentage` for identical container dimensions.

    Raises:
        CoordinateMappingError: If the container has no layout yet.
    """
    _validate_container(container_width, container_height)
    return Point(
        x=(percent_x / 100) * container_width,
        y=(percent_y / 100) * container_height,
    )
