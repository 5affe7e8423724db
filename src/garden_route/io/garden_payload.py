# io/garden_payload.py
"""
Validation of the in-memory garden payload handed over by the upstream
parser (spreadsheet / GeoJSON readers live outside this package).

Accepts the parser's camelCase keys (``solidBuildings``) or snake_case
names, ignores anything the planner does not use (``z``, ``bounds``, ...).
"""

from math import isfinite

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from garden_route.domain.entities.geography import (
    GardenData,
    GardenFeatures,
    Plant,
    Point,
    Polyline,
    RoadSegment,
    WaterBody,
)


class PointModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    x: float
    y: float

    @field_validator("x", "y")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("coordinates must be finite")
        return v

    def to_domain(self) -> Point:
        return Point(self.x, self.y)


class ChainModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    points: list[PointModel] = Field(default_factory=list)

    def to_points(self) -> tuple[Point, ...]:
        return tuple(p.to_domain() for p in self.points)


class WaterModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    outer: list[PointModel] = Field(default_factory=list)
    holes: list[list[PointModel]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _points_as_outer(cls, v):
        # a plain polyline {points: [...]} is a water body without holes
        if isinstance(v, dict) and "outer" not in v and "points" in v:
            return {**v, "outer": v["points"]}
        return v

    def to_domain(self) -> WaterBody:
        return WaterBody(
            outer=tuple(p.to_domain() for p in self.outer),
            holes=tuple(tuple(p.to_domain() for p in h) for h in self.holes),
        )


class PlantModel(PointModel):
    radius: float

    @field_validator("radius")
    @classmethod
    def _nonneg(cls, v: float) -> float:
        if not isfinite(v) or v < 0:
            raise ValueError("radius must be a finite value >= 0")
        return v

    def to_plant(self) -> Plant:
        return Plant(self.x, self.y, self.radius)


class GardenPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    roads: list[ChainModel] = Field(default_factory=list)
    waters: list[WaterModel] = Field(default_factory=list)
    rocks: list[ChainModel] = Field(default_factory=list)
    solid_buildings: list[ChainModel] = Field(default_factory=list, alias="solidBuildings")
    semi_open_buildings: list[ChainModel] = Field(default_factory=list, alias="semiOpenBuildings")
    plants: list[PlantModel] = Field(default_factory=list)

    def to_domain(self) -> GardenData:
        features = GardenFeatures(
            waters=[w.to_domain() for w in self.waters],
            rocks=[Polyline(c.to_points()) for c in self.rocks],
            solid_buildings=[Polyline(c.to_points()) for c in self.solid_buildings],
            semi_open_buildings=[Polyline(c.to_points()) for c in self.semi_open_buildings],
            plants=[p.to_plant() for p in self.plants],
        )
        return GardenData(roads=[RoadSegment(c.to_points()) for c in self.roads], features=features)
