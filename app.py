"""Streamlit page: describe a post, get N design prompts, open or copy them."""

import logging
import time

import streamlit as st
import streamlit.components.v1 as components

from post_prompts import BatchRunner, ValidationError
from post_prompts.config import (
    DEFAULT_MODEL,
    GENERATION_DELAY,
    LOG_LEVEL,
    MAX_QUANTITY,
    MIN_QUANTITY,
    MODEL_HINTS,
    MODELS,
    TAB_STAGGER,
)
from post_prompts.services import build_chat_urls, format_all
from post_prompts.ui import copy_button_html, open_tabs_button_html

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@st.cache_resource
def get_runner() -> BatchRunner:
    return BatchRunner()


def render_inputs() -> tuple[str, str, int, bool]:
    """Left column: model, content, quantity and the generate button."""
    st.subheader("🧠 Select AI Model")
    models = list(MODELS)
    model = st.selectbox(
        "Model",
        models,
        index=models.index(DEFAULT_MODEL) if DEFAULT_MODEL in models else 0,
        format_func=MODELS.get,
        label_visibility="collapsed",
    )
    st.caption(MODEL_HINTS.get(model, ""))

    st.subheader("Describe Your Post Idea or Campaign")
    content = st.text_area(
        "Post description",
        placeholder=(
            "e.g., Create a hiring post for a female telecaller position with "
            "competitive salary and growth opportunities..."
        ),
        height=140,
        label_visibility="collapsed",
    )
    st.caption("Auto-assigns Angrio layout, fonts, color palette, and post type")

    st.subheader("Generation Settings")
    quantity = st.selectbox(
        "How many creative prompts?",
        list(range(MIN_QUANTITY, MAX_QUANTITY + 1)),
        index=2,
        format_func=lambda n: f"{n} prompt{'s' if n > 1 else ''}",
    )
    clicked = st.button(
        "🪄 Create Prompts",
        type="primary",
        use_container_width=True,
        disabled=not content.strip(),
    )
    return model, content, quantity, clicked


def generate(content: str, quantity: int) -> None:
    runner = get_runner()
    try:
        runner.validate(content, quantity)
    except ValidationError as e:
        st.error(str(e))
        return

    with st.spinner("Generating Prompts..."):
        time.sleep(GENERATION_DELAY)
        results = runner.run(content, quantity)
    st.session_state.results = results
    st.toast(f"Successfully created {quantity} unique Angrio post prompts.")


def render_results(model: str) -> None:
    """Right column: action buttons and one card per prompt."""
    results = st.session_state.get("results", [])
    if not results:
        st.info('Ready to Generate. Enter your post description and click "Create Prompts" to get started.')
        return

    left, right = st.columns([3, 1])
    with left:
        components.html(open_tabs_button_html(build_chat_urls(results, model), TAB_STAGGER), height=46)
    with right:
        components.html(copy_button_html(format_all(results)), height=46)

    for number, result in enumerate(results, start=1):
        with st.container(border=True):
            st.markdown(f"**Prompt {number}** &nbsp; `{result.category.value}`")
            st.markdown("**1️⃣ FINAL COPY**")
            st.code(result.final_copy, language=None)
            st.markdown("**2️⃣ IMAGE PROMPT**")
            st.code(result.image_prompt, language=None)
            st.markdown("**3️⃣ DESIGN NOTES**")
            st.code(result.design_notes, language=None)


def main():
    st.set_page_config(page_title="Angrio's AI Graphic Designer", page_icon="🪄", layout="wide")
    st.title("Angrio's AI Graphic Designer")
    st.caption("Generate professional post design prompts with Angrio's brand guidelines")

    col_in, col_out = st.columns(2)
    with col_in:
        model, content, quantity, clicked = render_inputs()
        if clicked:
            generate(content, quantity)
    with col_out:
        render_results(model)


main()
