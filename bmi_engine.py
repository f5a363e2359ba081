"""BMI computation and classification."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

# ------------------------ CONSTANTS ------------------------

CM_PER_METER = 100
METERS_PER_FOOT = 0.3048
KG_PER_POUND = 0.453592

# Lower bounds of Normal Weight, Overweight and Obese
CATEGORY_THRESHOLDS = (18.5, 25.0, 30.0)


class HeightUnit(str, Enum):
    CM = "cm"
    FT = "ft"


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class Category(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL_WEIGHT = "Normal Weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @property
    def advisory(self) -> str:
        return _ADVISORIES[self]

    @property
    def color(self) -> str:
        """Streamlit markdown color name for this category."""
        return _COLORS[self]

    @property
    def range_label(self) -> str:
        return _RANGE_LABELS[self]


_ADVISORIES = {
    Category.UNDERWEIGHT: "You may need to gain weight. Consider consulting a healthcare provider.",
    Category.NORMAL_WEIGHT: "You have a healthy body weight. Keep up the good work!",
    Category.OVERWEIGHT: "You may want to consider losing some weight for better health.",
    Category.OBESE: "Consider consulting a healthcare provider for a weight management plan.",
}

_COLORS = {
    Category.UNDERWEIGHT: "blue",
    Category.NORMAL_WEIGHT: "green",
    Category.OVERWEIGHT: "orange",
    Category.OBESE: "red",
}

_RANGE_LABELS = {
    Category.UNDERWEIGHT: "BMI less than 18.5",
    Category.NORMAL_WEIGHT: "BMI 18.5 - 24.9",
    Category.OVERWEIGHT: "BMI 25.0 - 29.9",
    Category.OBESE: "BMI 30.0 and above",
}


# ------------------------ DATA MODEL ------------------------

@dataclass(frozen=True)
class Measurement:
    """Validated form input. Age is carried for display only."""

    age: int
    height: float
    height_unit: HeightUnit
    weight: float
    weight_unit: WeightUnit


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: Category

    @property
    def advisory(self) -> str:
        return self.category.advisory

    @property
    def color(self) -> str:
        return self.category.color

    @property
    def display_value(self) -> float:
        """BMI rounded to one decimal place; classification never uses this."""
        return round(self.bmi, 1)


# ------------------------ CALCULATIONS ------------------------

def convert_height_to_meters(value: float, unit: HeightUnit) -> float:
    if unit == HeightUnit.FT:
        return value * METERS_PER_FOOT
    return value / CM_PER_METER


def convert_weight_to_kilograms(value: float, unit: WeightUnit) -> float:
    if unit == WeightUnit.LBS:
        return value * KG_PER_POUND
    return value


def classify(bmi: float) -> Category:
    """
    Map a BMI value to its category.

    Each range includes its lower bound, so 18.5, 25.0 and 30.0 fall into the
    higher category.
    """
    normal, overweight, obese = CATEGORY_THRESHOLDS
    if bmi < normal:
        return Category.UNDERWEIGHT
    elif bmi < overweight:
        return Category.NORMAL_WEIGHT
    elif bmi < obese:
        return Category.OVERWEIGHT
    else:
        return Category.OBESE


def compute_bmi(measurement: Measurement) -> BMIResult:
    """
    Compute BMI = weight_kg / height_m² for a validated measurement.

    No validation happens here: a zero height raises ZeroDivisionError.
    """
    height_m = convert_height_to_meters(measurement.height, measurement.height_unit)
    weight_kg = convert_weight_to_kilograms(measurement.weight, measurement.weight_unit)
    bmi = weight_kg / (height_m ** 2)

    category = classify(bmi)
    logger.debug(f"BMI {bmi:.4f} ({height_m:.4f} m, {weight_kg:.4f} kg) -> {category.value}")

    return BMIResult(bmi=bmi, category=category)
