from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # per-bridge records from auto-connect


# ----------------- GRAPH ---------------------


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    tolerance: float = 2.0  # meters; points closer than this share a node

    @field_validator("tolerance")
    @classmethod
    def _positive(cls, v: float) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError("tolerance must be a finite value > 0")
        return v


# ----------------- SCORERS ---------------------


class ScorerScenicDiversityModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["scenic_diversity"] = "scenic_diversity"
    near_m: float = 2.0  # water / rock / building proximity
    plant_margin_m: float = 1.0  # added to each plant's crown radius

    @field_validator("near_m", "plant_margin_m")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v < 0:
            raise ValueError(f"{info.field_name} must be a finite value >= 0")
        return v


ScorerUnion = Annotated[ScorerScenicDiversityModel, Field(discriminator="kind")]

# ----------------- ROUTE PLANNERS ---------------------


class RoutePlannerDiameterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["diameter"] = "diameter"
    start_node: int = Field(default=0, ge=0)  # first sweep origin; falls back to 0 if absent


RoutePlannerUnion = Annotated[RoutePlannerDiameterModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "garden"
    run_id: str = "local"
    log: LogModel = LogModel()
    graph: GraphModel = GraphModel()
    route_planner: RoutePlannerUnion = Field(default_factory=RoutePlannerDiameterModel)
    scorer: ScorerUnion = Field(default_factory=ScorerScenicDiversityModel)
