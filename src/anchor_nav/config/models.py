from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- PATH FINDERS ---------------------


class AStarPathFinderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    max_expansions: int | None = None  # None => unbounded

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_expansions must be > 0")
        return v


class BreadthFirstPathFinderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


PathFinderUnion = Annotated[
    AStarPathFinderModel | BreadthFirstPathFinderModel,
    Field(discriminator="kind"),
]

# ----------------- TRAIL GENERATORS ---------------------


class FixedStepTrailModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["fixed_step"] = "fixed_step"
    step_m: float = 0.5

    @field_validator("step_m")
    def _step_positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# single kind for now; becomes a discriminated union when a second generator lands
TrailGeneratorUnion = FixedStepTrailModel


# ------------------------------------------------------------------


class NavigationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path_finder: PathFinderUnion = Field(default_factory=AStarPathFinderModel)
    trail_generator: TrailGeneratorUnion = Field(default_factory=FixedStepTrailModel)
    log: LogModel = LogModel()
