"""
Validation rules for the calculator form and insert shapes for the
users / bmi_records tables.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from bmi_engine import BMIResult, Category, HeightUnit, Measurement, WeightUnit

logger = logging.getLogger(__name__)

MIN_AGE = 1
MAX_AGE = 120
MIN_HEIGHT = 0.1
MIN_WEIGHT = 0.1

FORM_FIELDS = ("age", "height", "weight", "height_unit", "weight_unit")


class BMICalculation(BaseModel):
    """Form input for one BMI calculation."""

    model_config = ConfigDict(frozen=True)

    age: int
    height: float
    weight: float
    height_unit: HeightUnit = HeightUnit.CM
    weight_unit: WeightUnit = WeightUnit.KG

    @field_validator("age", "height", "weight", mode="before")
    @classmethod
    def _require_value(cls, value: Any, info) -> Any:
        if value is None or value == "":
            raise PydanticCustomError("required", "{label} is required", {"label": info.field_name.capitalize()})
        if info.field_name == "age" and isinstance(value, float) and not value.is_integer():
            raise PydanticCustomError("whole_number", "Age must be a whole number")
        return value

    @field_validator("age")
    @classmethod
    def _check_age(cls, value: int) -> int:
        if value < MIN_AGE:
            raise PydanticCustomError("age_range", "Age must be at least 1")
        if value > MAX_AGE:
            raise PydanticCustomError("age_range", "Age must be less than 120")
        return value

    @field_validator("height")
    @classmethod
    def _check_height(cls, value: float) -> float:
        if value < MIN_HEIGHT:
            raise PydanticCustomError("height_range", "Height must be greater than 0")
        return value

    @field_validator("weight")
    @classmethod
    def _check_weight(cls, value: float) -> float:
        if value < MIN_WEIGHT:
            raise PydanticCustomError("weight_range", "Weight must be greater than 0")
        return value

    def to_measurement(self) -> Measurement:
        return Measurement(
            age=self.age,
            height=self.height,
            height_unit=self.height_unit,
            weight=self.weight,
            weight_unit=self.weight_unit,
        )


def validate_measurement(values: Dict[str, Any]) -> Tuple[Optional[Measurement], Dict[str, str]]:
    """
    Validate raw form values.

    Returns (measurement, {}) when every field is valid, otherwise
    (None, errors) with one message per invalid field.
    """
    data = {"age": None, "height": None, "weight": None}
    data.update({key: value for key, value in values.items() if key in FORM_FIELDS})

    try:
        calculation = BMICalculation(**data)
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(field, error["msg"])
        logger.debug(f"Form input rejected: {errors}")
        return None, errors

    return calculation.to_measurement(), {}


# ------------------------ INSERT SHAPES ------------------------

class InsertUser(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class InsertBMIRecord(BaseModel):
    """A bmi_records row without the generated id and created_at columns."""

    age: int
    height: float
    weight: float
    height_unit: HeightUnit
    weight_unit: WeightUnit
    bmi: float
    category: Category

    @classmethod
    def from_result(cls, measurement: Measurement, result: BMIResult) -> "InsertBMIRecord":
        return cls(
            age=measurement.age,
            height=measurement.height,
            weight=measurement.weight,
            height_unit=measurement.height_unit,
            weight_unit=measurement.weight_unit,
            bmi=result.bmi,
            category=result.category,
        )
