"""
NABR Climate Report — Page Data Loading

Every page calls ``load_report()``, which rereads both CSVs and rebuilds
the annotated table. The Streamlit cache is keyed on the files'
modification times, so edited inputs are picked up on the next render.
"""

from pathlib import Path
from typing import Tuple

import streamlit as st

from config.data_sources import DATA_DIR, DATA_SOURCES
from data_fetch.csv_loader import ObservationLoader
from analysis.pipeline import AnnotatedTable, build_annotated_table
from utils.logger import setup_logging

PAGE_CSS = """
<style>
  .note-card {
      background: #f8fafc; border-radius: 10px; padding: 14px 18px;
      border-left: 5px solid #dc7633; margin-bottom: 10px;
  }
  .note-card h3 { margin: 0 0 4px 0; font-size: 1.0rem; color: #555; }
  .stMetric label { font-size: 0.78rem !important; }
  hr { border-color: #e2e8f0 !important; }
</style>
"""


def _source_stamp(data_dir: Path) -> Tuple[float, ...]:
    return tuple(
        (data_dir / src["file"]).stat().st_mtime for src in DATA_SOURCES.values()
    )


@st.cache_data(show_spinner=False)
def _load(data_dir: str, stamp: Tuple[float, ...]) -> AnnotatedTable:
    loader = ObservationLoader(Path(data_dir))
    return build_annotated_table(loader.load_historic(), loader.load_nearterm())


def load_report(data_dir: Path = DATA_DIR) -> AnnotatedTable:
    """Annotated observation table, rebuilt whenever a source file changes."""
    return _load(str(data_dir), _source_stamp(Path(data_dir)))


def start_page(title: str, icon: str) -> None:
    """Page config, logging and shared CSS."""
    st.set_page_config(page_title=f"{title} — NABR Climate Report", page_icon=icon, layout="wide")
    setup_logging()
    st.markdown(PAGE_CSS, unsafe_allow_html=True)


def load_or_stop() -> AnnotatedTable:
    """Load the report data or show the error and stop the page."""
    with st.spinner("🔄 Reading observation files…"):
        try:
            return load_report()
        except Exception as e:
            st.error(f"⚠️ Could not build the report data: {e}")
            st.stop()
