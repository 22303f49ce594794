"""
Bee entity for Bee Catch.

Bees and hornets fly in straight lines and bounce off the screen edges.
The bounce only flips the velocity, it never pushes the entity back inside,
so a fast entity can poke a few pixels past the edge before turning around.
"""

from dataclasses import dataclass

from models import EntityKind, Point2D, Rectangle, SpeedTier


@dataclass
class Bee:
    """
    A flying, clickable entity (bee or hornet).

    Position is the top-left corner of the hit box. Velocity is in pixels
    per tick. Instances are mutated in place by the game each tick.
    """
    x: float
    y: float
    speed_x: float
    speed_y: float
    width: int
    height: int
    kind: EntityKind = EntityKind.BEE
    speed_tier: SpeedTier = SpeedTier.NORMAL
    visible: bool = True

    @property
    def is_hornet(self) -> bool:
        return self.kind == EntityKind.HORNET

    @property
    def is_high_speed(self) -> bool:
        return self.speed_tier == SpeedTier.HIGH

    @property
    def bounds(self) -> Rectangle:
        """Axis-aligned hit box."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def move(self, screen_width: int, screen_height: int) -> None:
        """
        Advance one tick and bounce off the screen edges.

        Args:
            screen_width: Width of the play area in pixels
            screen_height: Height of the play area in pixels
        """
        self.x += self.speed_x
        self.y += self.speed_y

        if self.x <= 0 or self.x >= screen_width - self.width:
            self.speed_x = -self.speed_x
        if self.y <= 0 or self.y >= screen_height - self.height:
            self.speed_y = -self.speed_y

    def contains_point(self, point: Point2D) -> bool:
        """
        Check if a point is inside the hit box (edges included).

        Args:
            point: Screen position to test

        Returns:
            True if point is inside the bee
        """
        return (self.x <= point.x <= self.x + self.width and
                self.y <= point.y <= self.y + self.height)

    def __str__(self) -> str:
        return (f"{self.kind.value}({self.speed_tier.value}) at ({self.x:.1f}, {self.y:.1f}) "
                f"v=({self.speed_x:.2f}, {self.speed_y:.2f})")
