from dataclasses import dataclass, field


# Core geometry types used by the route planner
@dataclass(frozen=True)
class Point:
    x: float  # meters in garden-plan coordinates
    y: float


@dataclass(frozen=True)
class RoadSegment:
    points: tuple[Point, ...]


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]


@dataclass(frozen=True)
class WaterBody:
    outer: tuple[Point, ...]
    holes: tuple[tuple[Point, ...], ...] = ()  # rendering only, ignored by scoring


@dataclass(frozen=True)
class Plant:
    x: float
    y: float
    radius: float  # crown radius, meters


@dataclass
class GardenFeatures:
    waters: list[WaterBody] = field(default_factory=list)
    rocks: list[Polyline] = field(default_factory=list)
    solid_buildings: list[Polyline] = field(default_factory=list)
    semi_open_buildings: list[Polyline] = field(default_factory=list)
    plants: list[Plant] = field(default_factory=list)

    @property
    def buildings(self) -> list[Polyline]:
        return self.solid_buildings + self.semi_open_buildings


@dataclass
class GardenData:
    roads: list[RoadSegment] = field(default_factory=list)
    features: GardenFeatures = field(default_factory=GardenFeatures)


@dataclass(frozen=True)
class GraphNode:
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class GraphEdge:
    source: int
    target: int
    length: float
    synthetic: bool = False  # True => bridging edge added by auto-connect
