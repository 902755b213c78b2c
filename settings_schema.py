from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from config import YamlConfig
from models import TrainingMaxSet


class TrainingMaxSettings(BaseModel):
    bench: float = Field(default=0.0, ge=0)
    squat: float = Field(default=0.0, ge=0)
    deadlift: float = Field(default=0.0, ge=0)
    overhead_press: float = Field(default=0.0, ge=0)


class SettingsSchema(BaseModel):
    weight_unit: Literal["kg", "lb"] = "lb"
    sex: Literal["male", "female"] = "male"
    training_maxes: TrainingMaxSettings = Field(default_factory=TrainingMaxSettings)
    lower_body_lifts: list[str] = Field(default_factory=lambda: ["squat", "deadlift"])


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))


def load_settings(config: YamlConfig) -> SettingsSchema:
    return validate_settings(config.load())


def training_maxes_from_settings(settings: SettingsSchema) -> TrainingMaxSet:
    tm = settings.training_maxes
    return TrainingMaxSet(
        bench=tm.bench,
        squat=tm.squat,
        deadlift=tm.deadlift,
        overhead_press=tm.overhead_press,
    )


def is_lower_body(lift: str, settings: SettingsSchema) -> bool:
    """Return whether ``lift`` progresses with the lower body increments."""
    return lift in settings.lower_body_lifts
