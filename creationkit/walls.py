"""Walls, solid walls and the factories that make them."""

from __future__ import annotations

import enum
import weakref
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence


class Material(enum.Enum):
    BRICK = "brick"
    AERATED_CONCRETE = "aerated concrete"
    DRYWALL = "drywall"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point2D:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass
class Wall:
    start: Point2D
    end: Point2D
    elevation: int
    height: int

    factory: ClassVar[BasicWallFactory]

    def __str__(self) -> str:
        return (
            f"start: {self.start} end: {self.end}"
            f" elevation: {self.elevation} height: {self.height}"
        )

    def intersects(self, other: Wall) -> bool:
        """Return whether this wall crosses the other; walls never do yet."""
        return False


class BasicWallFactory:
    """Makes plain walls."""

    def create(self, start: Point2D, end: Point2D, elevation: int, height: int) -> Wall:
        return Wall(start, end, elevation, height)


Wall.factory = BasicWallFactory()


@dataclass
class SolidWall(Wall):
    width: int
    material: Material

    def __post_init__(self) -> None:
        if self.elevation < 0 and self.material is Material.AERATED_CONCRETE:
            raise ValueError("elevation")
        if self.width < 120 and self.material is Material.BRICK:
            raise ValueError("width")

    def __str__(self) -> str:
        return f"{super().__str__()} width: {self.width} material: {self.material}"

    @staticmethod
    def create_main(start: Point2D, end: Point2D, elevation: int, height: int) -> SolidWall:
        return SolidWall(start, end, elevation, height, 275, Material.AERATED_CONCRETE)

    @staticmethod
    def create_partition(start: Point2D, end: Point2D, elevation: int, height: int) -> SolidWall:
        return SolidWall(start, end, elevation, height, 120, Material.BRICK)


class WallType(enum.Enum):
    BASIC = "basic"
    MAIN = "main"
    PARTITION = "partition"


class WallFactory:
    """Makes walls, refusing ones that would be invalid."""

    _walls: ClassVar[list[weakref.ReferenceType[Wall]]] = []

    @staticmethod
    def create_main(
        start: Point2D, end: Point2D, elevation: int, height: int
    ) -> Optional[SolidWall]:
        """Return a main wall, or None if it would be below ground."""
        if elevation < 0:
            return None
        return SolidWall(start, end, elevation, height, 275, Material.AERATED_CONCRETE)

    @staticmethod
    def create_partition(
        start: Point2D, end: Point2D, elevation: int, height: int
    ) -> Optional[SolidWall]:
        """Return a partition, or None if it would cross a living wall."""
        this_wall = SolidWall(start, end, elevation, height, 120, Material.BRICK)
        live = [w for w in (ref() for ref in WallFactory._walls) if w is not None]
        if any(this_wall.intersects(other) for other in live):
            return None
        WallFactory._walls = [weakref.ref(w) for w in live]
        WallFactory._walls.append(weakref.ref(this_wall))
        return this_wall

    @staticmethod
    def create_wall(
        wall_type: WallType, start: Point2D, end: Point2D, elevation: int, height: int
    ) -> Optional[Wall]:
        match wall_type:
            case WallType.MAIN:
                return SolidWall(
                    start, end, elevation, height, 375, Material.AERATED_CONCRETE
                )
            case WallType.PARTITION:
                return SolidWall(start, end, elevation, height, 120, Material.BRICK)
            case WallType.BASIC:
                return Wall(start, end, elevation, height)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the wall factories at work."""
    main_wall = SolidWall.create_main(Point2D(0, 0), Point2D(0, 3000), 2700, 3000)
    print(main_wall)

    also_main_wall = WallFactory.create_main(Point2D(0, 0), Point2D(10000, 0), -2000, 3000)
    if also_main_wall is None:
        print("Main wall not created")

    partition = WallFactory.create_partition(Point2D(2000, 0), Point2D(2000, 4000), 0, 2700)
    print(partition)

    also_partition = WallFactory.create_wall(
        WallType.PARTITION, Point2D(0, 0), Point2D(5000, 0), 0, 4200
    )
    if also_partition is not None:
        print(also_partition)

    basic = Wall.factory.create(Point2D(0, 0), Point2D(5000, 0), 0, 3000)
    print(basic)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())