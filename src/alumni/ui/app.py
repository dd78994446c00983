"""Interactive alumni showcase (Streamlit).

Run:
  streamlit run src/alumni/ui/app.py
"""

import streamlit as st

from alumni.categories.table import ALL, button_label, filter_choices
from alumni.common.logging_setup import setup_logging
from alumni.config import Settings
from alumni.ui.cards import card_html
from alumni.view.controller import ShowcaseController

PAGE_TITLE = "Alumni Showcase"

CARD_CSS = """
<style>
.alumni-card { border: 1px solid #e5e7eb; border-radius: 14px; padding: 14px; margin-bottom: 12px; background: #fff; }
.card-header { display:flex; gap: 12px; align-items: center; }
.alumni-photo { width: 64px; height: 64px; border-radius: 50%; object-fit: cover; }
.alumni-info h4 { margin: 0 0 4px 0; }
.alumni-info p { margin: 0; color: #6b7280; }
.package-badge { background: #dcfce7; color: #166534; padding: 1px 8px; border-radius: 999px; }
.alumni-feedback { margin-top: 10px; font-style: italic; color: #6b7280; }
</style>
"""


def _controller() -> ShowcaseController:
    if "controller" not in st.session_state:
        settings = Settings.from_env()
        setup_logging(settings, console=False)
        controller = ShowcaseController.load(settings)
        controller.select(ALL)
        st.session_state.controller = controller
    return st.session_state.controller


st.set_page_config(page_title=PAGE_TITLE, layout="wide")
st.markdown(CARD_CSS, unsafe_allow_html=True)
st.title(PAGE_TITLE)

controller = _controller()

cols = st.columns(len(filter_choices()))
for col, cat in zip(cols, filter_choices()):
    with col:
        st.button(
            button_label(cat),
            key=f"cat_{cat}",
            type="primary" if cat == controller.category else "secondary",
            on_click=controller.select,
            args=(cat,),
        )

message = controller.message()
if message:
    if controller.load_error:
        st.error(message)
    else:
        st.info(message)
else:
    st.caption(f"Showing {controller.state.rendered} of {controller.state.total} alumni")
    grid = st.columns(2)
    for i, card in enumerate(controller.visible_cards()):
        with grid[i % 2]:
            st.markdown(card_html(card), unsafe_allow_html=True)

if controller.has_more:
    st.button("Show More", key="show_more", on_click=controller.reveal_next)
