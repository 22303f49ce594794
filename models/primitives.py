"""
Geometry types shared by the framework and the games.

Positions and hit boxes are frozen pydantic models, so they can be passed
around and compared without worrying about aliasing.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Point2D(BaseModel):
    """A position in screen coordinates (y grows downwards).

    Examples:
        >>> Point2D(x=120.0, y=80.5)
        Point2D(x=120.0, y=80.5)
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Input events describe where a press landed as a vector from the origin
Vector2D = Point2D


class Rectangle(BaseModel):
    """Axis-aligned box with its top-left corner at (x, y).

    Used as the hit box of flying entities. Width and height must not be
    negative; a zero-size box still contains its corner.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def _not_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f'Rectangle size must not be negative, got {v}')
        return v

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """True if point lies inside or on the edge.

        >>> Rectangle(x=0, y=0, width=10, height=10).contains_point(Point2D(x=10, y=5))
        True
        """
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom
