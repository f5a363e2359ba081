"""Tables, charts and downloads rendered by the calculator page."""

from datetime import datetime
from io import BytesIO

import pandas as pd
import plotly.graph_objects as go
from openpyxl.utils import get_column_letter

from bmi_engine import CATEGORY_THRESHOLDS, BMIResult, Category
from schema import InsertBMIRecord

# ------------------------ COLOR PALETTE ------------------------
colors = {
    Category.UNDERWEIGHT: "#42a5f5",
    Category.NORMAL_WEIGHT: "#66bb6a",
    Category.OVERWEIGHT: "#ffca28",
    Category.OBESE: "#ef5350",
}

GAUGE_MIN = 10.0
GAUGE_MAX = 40.0

EXPORT_SHEET = "BMI Result"


def format_bmi(result: BMIResult) -> str:
    return f"{result.display_value:.1f}"


def category_reference_frame() -> pd.DataFrame:
    """Reference table of the four categories, lowest BMI first."""
    return pd.DataFrame(
        [
            {"Category": category.value, "BMI Range": category.range_label, "Advice": category.advisory}
            for category in Category
        ]
    )


def bmi_gauge(result: BMIResult) -> go.Figure:
    """Gauge of the BMI with one colored band per category."""
    bounds = [min(GAUGE_MIN, result.bmi), *CATEGORY_THRESHOLDS, max(GAUGE_MAX, result.bmi)]
    steps = [
        {"range": [bounds[i], bounds[i + 1]], "color": colors[category]}
        for i, category in enumerate(Category)
    ]

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=result.display_value,
            number={"valueformat": ".1f"},
            title={"text": result.category.value},
            gauge={
                "axis": {"range": [bounds[0], bounds[-1]]},
                "bar": {"color": "#37474f", "thickness": 0.3},
                "steps": steps,
            },
        )
    )
    fig.update_layout(height=260, margin=dict(l=20, r=20, t=50, b=10))
    return fig


def export_record_to_excel(record: InsertBMIRecord) -> BytesIO:
    """Write one bmi_records-shaped row to an in-memory workbook (cells keep ~15 significant digits)."""
    output_df = pd.DataFrame([record.model_dump(mode="json")])

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        output_df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET)
        worksheet = writer.sheets[EXPORT_SHEET]

        for col_idx, column_cells in enumerate(worksheet.columns, 1):
            max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
            worksheet.column_dimensions[get_column_letter(col_idx)].width = max_length + 2

    output.seek(0)
    return output


def export_filename(now: datetime) -> str:
    timestamp = now.strftime("%d %b - %H%M")
    return f"bmi_result_{timestamp}.xlsx"
