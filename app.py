# app.py
# Run:
#   streamlit run app.py
#
# Single page: weight range + goals in, protein table (and CSV) out.
# Nothing is stored between sessions; the export is a browser download.

import logging

import streamlit as st

from app_utils.config import (
    CSV_MEDIA_TYPE,
    DEFAULT_MAX_WEIGHT,
    DEFAULT_MIN_WEIGHT,
    DEFAULT_ROWS,
    LOG_FORMAT,
    MAX_ROWS,
    MIN_ROWS,
)
from app_utils.export import export_filename, serialize_csv
from app_utils.goals import GOALS, goal_hint, toggle_goal
from app_utils.plots import ranges_figure
from app_utils.table import clamp, to_number
from features.planner import Parameters, default_parameters, plan, table_frame

logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
logger = logging.getLogger(__name__)


# =========================
# 0) APP CONFIG + THEME
# =========================
st.set_page_config(page_title="Besoins en protéines", layout="wide", page_icon="🥚")

CUSTOM_CSS = """
<style>
.block-container {padding-top: 1.2rem; padding-bottom: 2rem; max-width: 1100px;}
h1, h2, h3 {letter-spacing: -0.02em;}
.small {opacity: 0.85; font-size: 0.92rem;}
hr {opacity: 0.25;}
.js-plotly-plot, .plotly, .plot-container {border-radius: 18px;}
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# =========================
# 1) FORM STATE
# =========================
def apply_parameters(params):
    st.session_state["min_weight"] = float(params.min_weight)
    st.session_state["max_weight"] = float(params.max_weight)
    st.session_state["rows"] = int(params.row_count)
    st.session_state["selection"] = frozenset(params.selection)
    for g in GOALS:
        st.session_state[f"goal_{g.key}"] = g.key in params.selection


def reset_form():
    logger.info("Form reset to defaults")
    apply_parameters(default_parameters())


def on_toggle(key):
    st.session_state["selection"] = toggle_goal(st.session_state["selection"], key)


if "selection" not in st.session_state:
    reset_form()


def current_parameters():
    return Parameters(
        min_weight=to_number(st.session_state["min_weight"], DEFAULT_MIN_WEIGHT),
        max_weight=to_number(st.session_state["max_weight"], DEFAULT_MAX_WEIGHT),
        row_count=clamp(int(to_number(st.session_state["rows"], DEFAULT_ROWS)), MIN_ROWS, MAX_ROWS),
        selection=st.session_state["selection"],
    )


# =========================
# 2) APP UI
# =========================
st.title("Générateur de besoins en protéines")
st.caption("Génère dynamiquement un tableau de besoins journaliers en protéines selon le poids et l’objectif.")

st.subheader("Paramètres")

cols = st.columns(3)
with cols[0]:
    st.number_input("Poids minimum (kg)", step=1.0, key="min_weight")
with cols[1]:
    st.number_input("Poids maximum (kg)", step=1.0, key="max_weight")
with cols[2]:
    st.number_input("Nombre de lignes (2–50)", min_value=MIN_ROWS, max_value=MAX_ROWS, step=1, key="rows")

st.markdown("#### Objectifs")
chips = st.columns(len(GOALS))
for col, g in zip(chips, GOALS):
    with col:
        st.checkbox(f"{g.label} {goal_hint(g)}", key=f"goal_{g.key}", on_change=on_toggle, args=(g.key,))

params = current_parameters()
result = plan(params)

if not result.ok:
    st.error("**À corriger :**\n\n" + "\n".join(f"- {err}" for err in result.violations))

actions = st.columns([1, 1, 4])
with actions[0]:
    st.button("Réinitialiser", on_click=reset_form, use_container_width=True)
with actions[1]:
    st.download_button(
        "Export CSV",
        data=serialize_csv(result.table) if result.ok else b"",
        file_name=export_filename(params.min_weight, params.max_weight, params.row_count),
        mime=CSV_MEDIA_TYPE,
        disabled=not result.ok,
        help="Exporter le tableau en CSV" if result.ok else "Corrige les erreurs avant d’exporter",
        use_container_width=True,
    )

st.markdown("---")
st.subheader("Tableau généré")

if not result.ok:
    st.caption("Le tableau s’affichera dès que les paramètres seront valides.")
else:
    st.dataframe(table_frame(result), use_container_width=True, hide_index=True)
    fig = ranges_figure(result)
    if fig is not None:
        st.plotly_chart(fig, use_container_width=True)

st.markdown("---")
st.caption("Fourchettes indicatives en g de protéines par kg de poids corporel et par jour · Pas un avis médical")
