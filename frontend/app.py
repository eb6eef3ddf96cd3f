import streamlit as st

from sentiment_app.client import (
    AnalyzeRequestError,
    AnalyzerClient,
    ClientPhase,
    ReviewFormState,
    can_submit,
    edit,
    fail,
    preview_words,
    reset,
    submit,
    succeed,
)

# Page config
st.set_page_config(
    page_title="Sentiment Analyzer",
    page_icon="🎬",
    layout="centered"
)


@st.cache_resource
def get_client() -> AnalyzerClient:
    return AnalyzerClient()


def set_state(state: ReviewFormState) -> None:
    st.session_state.form = state
    st.rerun()


if "form" not in st.session_state:
    st.session_state.form = ReviewFormState()

state: ReviewFormState = st.session_state.form


def render_form(state: ReviewFormState) -> None:
    st.write("Enter your movie review below to get a sentiment analysis.")

    text = st.text_area(
        "Movie review",
        value=state.review,
        height=200,
        placeholder="Enter your movie review here...",
        disabled=state.loading,
    )
    state = edit(state, text)
    st.session_state.form = state

    if state.error:
        st.error(state.error)

    label = "Analyzing..." if state.loading else "Analyze"
    if st.button(label, disabled=not can_submit(state), type="primary"):
        set_state(submit(state))


def run_submission(state: ReviewFormState) -> None:
    with st.spinner("Analyzing..."):
        try:
            verdict = get_client().analyze(state.review)
        except AnalyzeRequestError:
            set_state(fail(state))
        else:
            set_state(succeed(state, verdict))


def render_result(state: ReviewFormState) -> None:
    result = state.result
    counts = result.word_counts

    col1, col2 = st.columns(2)
    col1.metric("Sentiment", result.sentiment.capitalize())
    col2.metric("Confidence", f"{result.confidence * 100:.0f}%")

    st.subheader("Explanation")
    st.write(result.explanation)

    st.subheader("Word Analysis")
    pos_col, neg_col, neu_col = st.columns(3)
    with pos_col:
        st.metric("Positive words", counts.positive)
        if result.positive_words:
            st.caption(preview_words(result.positive_words))
    with neg_col:
        st.metric("Negative words", counts.negative)
        if result.negative_words:
            st.caption(preview_words(result.negative_words))
    with neu_col:
        st.metric("Neutral words", counts.neutral)
        st.caption("Words that maintain narrative balance without emotional weight")

    if st.button("Analyze Another Review"):
        set_state(reset(state))


st.title("🎬 Sentiment Analyzer")

if state.phase is ClientPhase.SUCCESS:
    render_result(state)
elif state.phase is ClientPhase.SUBMITTING:
    render_form(state)
    run_submission(state)
else:
    render_form(state)
