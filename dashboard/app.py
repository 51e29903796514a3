import warnings

import altair as alt
import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from fars import plot_state, summarize_years
from fars.exceptions import FarsError, InvalidYearWarning

st.set_page_config(page_title="FARS accidents by month", layout="wide")

FIRST_YEAR = 1975
LAST_YEAR = 2022


@st.cache_data
def load_summary(years: tuple, data_dir: str):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", InvalidYearWarning)
        matrix = summarize_years(years, data_dir=data_dir)
    skipped = [str(w.message) for w in caught if issubclass(w.category, InvalidYearWarning)]
    return matrix, skipped


def summary_long(matrix: pd.DataFrame) -> pd.DataFrame:
    """Reshape the month by year matrix for charting."""
    return (
        matrix.melt("MONTH", var_name="year", value_name="accidents")
        .dropna(subset=["accidents"])
        .astype({"year": "string", "accidents": "int64"})
    )


# ── Sidebar filters ──────────────────────────────────────────────
st.sidebar.header("Data")
data_dir = st.sidebar.text_input("Data directory", ".")
start, end = st.sidebar.slider("Years", FIRST_YEAR, LAST_YEAR, (2013, 2015))
years = tuple(range(start, end + 1))

matrix, skipped = load_summary(years, data_dir)
for message in skipped:
    st.sidebar.warning(message)

if matrix.empty:
    st.error("No accident files found for the selected years")
    st.stop()

# ── Monthly counts ───────────────────────────────────────────────
st.header("Accidents per month")
st.dataframe(matrix)

source = summary_long(matrix)
line = alt.Chart(source).mark_line(point=True).encode(
    x='MONTH:O',
    y='accidents:Q',
    color='year:N',
    tooltip=['year', 'MONTH', 'accidents']
).properties(height=300)
st.altair_chart(line, use_container_width=True)

heat = alt.Chart(source).mark_rect().encode(
    x='MONTH:O',
    y='year:N',
    color=alt.Color('accidents:Q', scale=alt.Scale(scheme='reds')),
    tooltip=['year', 'MONTH', 'accidents']
).properties(height=300)
st.altair_chart(heat, use_container_width=True)

# ── State map ────────────────────────────────────────────────────
st.header("Accident locations")
loaded_years = [int(c) for c in matrix.columns if c != "MONTH"]
map_year = st.selectbox("Year", loaded_years)
state = st.number_input("State code", min_value=1, max_value=99, value=1)

fig, ax = plt.subplots(figsize=(8, 6))
try:
    plot_state(state, map_year, data_dir, ax=ax)
except FarsError as exc:
    st.error(str(exc))
else:
    if ax.has_data():
        st.pyplot(fig)
    else:
        st.info("No accidents to plot")
finally:
    plt.close(fig)

csv = matrix.to_csv(index=False).encode("utf-8")
st.download_button(
    label="Download summary as CSV",
    data=csv,
    file_name="fars_monthly_summary.csv",
    mime="text/csv",
)
