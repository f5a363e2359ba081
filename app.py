import logging
from datetime import datetime
from zoneinfo import ZoneInfo

import streamlit as st

from bmi_engine import BMIResult, HeightUnit, Measurement, WeightUnit, compute_bmi
from presentation import (
    bmi_gauge,
    category_reference_frame,
    export_filename,
    export_record_to_excel,
    format_bmi,
)
from schema import FORM_FIELDS, InsertBMIRecord, validate_measurement
from settings import get_settings, setup_logging

settings = get_settings()
setup_logging(settings)

logger = logging.getLogger(__name__)

# ------------------------ UI CONFIGURATION ------------------------
st.set_page_config(page_title=settings.page_title, page_icon="❤️", layout="wide")

FIELD_DEFAULTS = {
    "age": None,
    "height": None,
    "weight": None,
    "height_unit": HeightUnit.CM.value,
    "weight_unit": WeightUnit.KG.value,
}

# Last valid result survives invalid edits until Reset
STATE_DEFAULTS = {
    "result": None,
    "measurement": None,
    "submitted": False,
}

DISCLAIMER = (
    "**Disclaimer:** BMI is a screening tool and not a diagnostic tool. "
    "Consult with a healthcare provider for a comprehensive health assessment."
)

for key, value in STATE_DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value

# ------------------------ HELPER FUNCTIONS ------------------------

def form_values():
    return {field: st.session_state.get(field, FIELD_DEFAULTS[field]) for field in FORM_FIELDS}


def submit_form():
    st.session_state["submitted"] = True
    _, errors = validate_measurement(form_values())
    if errors:
        logger.info(f"Calculation rejected, invalid fields: {', '.join(sorted(errors))}")


def reset_form():
    for field, value in FIELD_DEFAULTS.items():
        st.session_state[field] = value
    for key, value in STATE_DEFAULTS.items():
        st.session_state[key] = value
    logger.debug("Form reset")


def render_result(result: BMIResult, measurement: Measurement):
    st.subheader("🧮 Your BMI Results")

    st.markdown(f"## {format_bmi(result)}")
    st.markdown(f"### :{result.color}[{result.category.value}]")
    st.write(result.advisory)

    st.plotly_chart(bmi_gauge(result))

    st.markdown("#### Health Assessment")
    st.markdown(
        f"- **Your BMI:** {format_bmi(result)}\n"
        f"- **Category:** :{result.color}[{result.category.value}]\n"
        f"- **Age:** {measurement.age} years"
    )

    record = InsertBMIRecord.from_result(measurement, result)
    now = datetime.now(ZoneInfo(settings.timezone))

    st.download_button(
        label="📥 Download Result",
        data=export_record_to_excel(record),
        file_name=export_filename(now),
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        key="download",
    )


def render_reference():
    st.subheader("ℹ️ BMI Categories")
    st.dataframe(category_reference_frame(), hide_index=True)
    st.warning(DISCLAIMER)


# ------------------------ HEADER ------------------------
st.title("❤️ BMI Calculator")
st.caption("Calculate your Body Mass Index and assess your health status")

form_col, results_col = st.columns(2)

# ------------------------ FORM ------------------------
with form_col:
    st.subheader("👤 Your Information")

    age = st.number_input("Age (years)", value=None, step=1, placeholder="Enter your age", key="age")
    age_error = st.empty()

    height_value_col, height_unit_col = st.columns([4, 1])
    with height_value_col:
        height = st.number_input("Height", value=None, step=0.1, placeholder="Enter height", key="height")
    with height_unit_col:
        height_unit = st.selectbox("Unit", [unit.value for unit in HeightUnit], key="height_unit")
    height_error = st.empty()

    weight_value_col, weight_unit_col = st.columns([4, 1])
    with weight_value_col:
        weight = st.number_input("Weight", value=None, step=0.1, placeholder="Enter weight", key="weight")
    with weight_unit_col:
        weight_unit = st.selectbox("Unit", [unit.value for unit in WeightUnit], key="weight_unit")
    weight_error = st.empty()

    calculate_col, reset_col = st.columns([3, 1])
    with calculate_col:
        st.button("🧮 Calculate BMI", key="calculate", on_click=submit_form, type="primary")
    with reset_col:
        st.button("🔄 Reset", key="reset", on_click=reset_form)

error_slots = {
    "age": age_error,
    "height": height_error,
    "height_unit": height_error,
    "weight": weight_error,
    "weight_unit": weight_error,
}

# ------------------------ MAIN LOGIC ------------------------
measurement, errors = validate_measurement(
    {
        "age": age,
        "height": height,
        "weight": weight,
        "height_unit": height_unit,
        "weight_unit": weight_unit,
    }
)

# Recomputed on every rerun, i.e. on every input change
if measurement is not None:
    st.session_state["result"] = compute_bmi(measurement)
    st.session_state["measurement"] = measurement

if st.session_state["submitted"]:
    for field, message in errors.items():
        slot = error_slots.get(field)
        if slot is not None:
            slot.error(message, icon="⚠️")

# ------------------------ RESULTS ------------------------
with results_col:
    if st.session_state["result"] is not None:
        try:
            render_result(st.session_state["result"], st.session_state["measurement"])
        except Exception as e:
            logger.exception("Failed to render BMI result")
            st.error(f"Error while rendering the result: {e}", icon="❌")

    render_reference()
