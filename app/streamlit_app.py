import streamlit as st

from confidence_meter.calibration import confidence, resolve_meter_params, softmax
from confidence_meter.charts import CHART_CSS, render_bar_chart, render_meter, render_temperature_status
from confidence_meter.config import (
    BASIC_LABELS,
    BASIC_SCORES,
    CLOSE_RACE_SCORES,
    DEFAULT_TEMPERATURE,
    DEMO_TEMP_LABELS,
    DEMO_TEMP_SCORES,
    MAX_BARS,
    RANK_LABELS,
    SAMPLE_DATA,
    SOLO_SCORES,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    TEMPERATURE_STEP,
)
from confidence_meter.meter import evaluate_candidates
from confidence_meter.preprocessing import parse_candidates


st.set_page_config(page_title="Softmax Confidence Meter", layout="wide")
st.markdown(CHART_CSS, unsafe_allow_html=True)
st.title("Softmax Confidence Meter")
st.caption("Scores → softmax (with temperature) → entropy → confidence")

params = resolve_meter_params()
default_T = float(params.get("T", DEFAULT_TEMPERATURE))
default_T = min(max(default_T, TEMPERATURE_MIN), TEMPERATURE_MAX)
max_bars = int(params.get("max_bars", MAX_BARS))

if "candidate_input" not in st.session_state:
    st.session_state["candidate_input"] = ""


def chart(labels, probs, **kwargs):
    st.markdown(render_bar_chart(zip(labels, probs), **kwargs), unsafe_allow_html=True)


def load_sample(key: str):
    st.session_state["candidate_input"] = SAMPLE_DATA[key]


def clear_input():
    st.session_state["candidate_input"] = ""


tab_basics, tab_temp, tab_shape, tab_try = st.tabs(
    ["Softmax basics", "Temperature", "Distribution shape", "Try it"]
)

with tab_basics:
    st.subheader("From scores to probabilities")
    st.write(
        "Softmax exponentiates each score and divides by the total, "
        "so every candidate gets a share and the shares sum to 100%."
    )
    chart(BASIC_LABELS, softmax(BASIC_SCORES, 1.0))

    with st.expander("Why subtract the maximum first?"):
        st.write(
            "exp() overflows for large scores. Subtracting the largest score from every "
            "score leaves the result unchanged and keeps every exponent at or below zero."
        )
    with st.expander("How is confidence computed?"):
        st.latex(r"H = -\sum_i p_i \ln p_i")
        st.latex(r"\text{confidence} = \left(1 - \frac{H}{\ln N}\right) \times 100")
        st.write("A one-hot distribution scores 100, a uniform one scores 0.")

with tab_temp:
    st.subheader("Temperature")
    demo_T = st.slider(
        "Demo temperature",
        min_value=TEMPERATURE_MIN,
        max_value=TEMPERATURE_MAX,
        value=DEFAULT_TEMPERATURE,
        step=TEMPERATURE_STEP,
        key="demo_temperature",
    )
    demo_probs = softmax(DEMO_TEMP_SCORES, demo_T)
    chart(DEMO_TEMP_LABELS, demo_probs)

    st.metric("Confidence", f"{confidence(demo_probs):.1f}")
    st.markdown(render_temperature_status(demo_T), unsafe_allow_html=True)

with tab_shape:
    st.subheader("Runaway leader vs. close race")
    col1, col2 = st.columns([1, 1])
    with col1:
        st.write("**Runaway leader**")
        chart(RANK_LABELS, softmax(SOLO_SCORES, 1.0))
    with col2:
        st.write("**Close race**")
        chart(RANK_LABELS, softmax(CLOSE_RACE_SCORES, 1.0))

with tab_try:
    col1, col2 = st.columns([1, 1])

    with col1:
        st.subheader("Candidates")
        st.text_area(
            "One per line: `name:score` or just `score`",
            key="candidate_input",
            height=170,
            placeholder="Candidate A:3.5\nCandidate B:2.1",
        )

        sample_cols = st.columns(len(SAMPLE_DATA) + 1)
        for col, key in zip(sample_cols, SAMPLE_DATA):
            col.button(key.capitalize(), on_click=load_sample, args=(key,), key=f"sample_{key}")
        sample_cols[-1].button("Clear", on_click=clear_input)

        T = st.slider(
            "Temperature",
            min_value=TEMPERATURE_MIN,
            max_value=TEMPERATURE_MAX,
            value=default_T,
            step=TEMPERATURE_STEP,
            key="temperature",
        )

    with col2:
        st.subheader("Result")
        candidates = parse_candidates(st.session_state["candidate_input"])

        if not candidates:
            st.info("Enter scores to see the distribution and confidence.")
        else:
            try:
                result = evaluate_candidates(candidates, T)
            except ValueError as e:
                st.error(str(e))
            else:
                st.markdown(render_meter(result.confidence, result.label), unsafe_allow_html=True)
                st.markdown(
                    render_bar_chart(result.ranked, max_bars=max_bars),
                    unsafe_allow_html=True,
                )
                with st.expander("Details"):
                    st.write(f"Entropy: **{result.entropy:.4f}** nats")
                    for item in result.ranked:
                        st.write(f"- {item.label}: score {item.score:g}, p={item.probability:.4f}")
