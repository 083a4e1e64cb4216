"""HoloPass -- Streamlit web interface."""

import datetime
import logging

import streamlit as st

from holopass import (
    DEFAULT_OPTIONS,
    GenerationOptions,
    HoloPassError,
    estimate_strength,
    generate_password,
    has_enabled_category,
)

logger = logging.getLogger(__name__)

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=20, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

ICON_LOCK = _LUCIDE.format(s=16, paths=(
    '<rect width="18" height="11" x="3" y="11" rx="2" ry="2"/>'
    '<path d="M7 11V7a5 5 0 0 1 10 0v4"/>'
))

TIPS = [
    ("Use length over complexity",
     "Length boosts entropy the most. Aim for 14+ characters when possible."),
    ("Unique per site",
     "Never reuse passwords. A breach on one site should not affect others."),
    ("Avoid patterns",
     "Skip common phrases, keyboard walks, or personal info."),
    ("Use a manager",
     "Store and autofill with a reputable password manager for convenience."),
]

# Indexed by score; score 0 has no filled segment
COLORS = ["#ef4444", "#f97316", "#eab308", "#84cc16", "#10b981"]

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="HoloPass",
    page_icon="\U0001f6e1\ufe0f",
    layout="wide",
)

st.markdown("""<style>
/* Always show copy-to-clipboard button on code blocks */
[data-testid="stCode"] button,
[data-testid="stCodeBlock"] button,
pre + div {
    opacity: 1 !important;
    visibility: visible !important;
}
.hp-bar { display:grid; grid-template-columns:repeat(4,1fr); gap:6px; }
.hp-bar div { height:8px; border-radius:4px; background:rgba(127,127,127,0.2); }
</style>""", unsafe_allow_html=True)

# ── Hero ──────────────────────────────────────────────────────────────────

st.caption("Futuristic identity • Holographic vibes")
st.title("Generate strong passwords in one click")
st.markdown(
    "A simple, delightful password generator with instant strength "
    "insights and copy-friendly actions."
)


# ── Generator widget ──────────────────────────────────────────────────────


def _regenerate(options: GenerationOptions) -> None:
    st.session_state.error = None
    if not has_enabled_category(options):
        st.session_state.password = ""
        return
    try:
        st.session_state.password = generate_password(options)
    except HoloPassError as exc:
        logger.info("Generation failed: %s", exc)
        st.session_state.password = ""
        st.session_state.error = str(exc)


def _strength_bar(report: dict) -> str:
    color = COLORS[report["score"]]
    cells = "".join(
        f'<div style="background:{color}"></div>' if i < report["score"] else "<div></div>"
        for i in range(4)
    )
    return f'<div class="hp-bar">{cells}</div>'


col_gen, col_tips = st.columns([2, 1])

with col_gen:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_SHIELD} <strong>Secure Password Generator</strong></p>',
        unsafe_allow_html=True,
    )
    length = st.slider("Length", 6, 64, DEFAULT_OPTIONS.length)
    left, right = st.columns(2)
    with left:
        lowercase = st.checkbox("Include lowercase (a–z)", value=True)
        digits = st.checkbox("Include numbers (0–9)", value=True)
        exclude_ambiguous = st.checkbox(
            "Exclude similar-looking", value=True,
            help="Avoid characters like I, l, 1, O, 0, S, 5, Z, 2",
        )
    with right:
        uppercase = st.checkbox("Include uppercase (A–Z)", value=True)
        symbols = st.checkbox("Include symbols (!@#…)", value=True)
        forbid_repeats = st.checkbox(
            "No duplicate characters", value=False,
            help="Prevents repeating the same character",
        )

    options = GenerationOptions(
        length=length,
        lowercase=lowercase,
        uppercase=uppercase,
        digits=digits,
        symbols=symbols,
        exclude_ambiguous=exclude_ambiguous,
        forbid_repeats=forbid_repeats,
    )

    if "password" not in st.session_state:
        _regenerate(options)

    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_LOCK} Generated password</p>',
        unsafe_allow_html=True,
    )
    if st.button("Regenerate", type="primary"):
        _regenerate(options)

    password = st.session_state.password
    if st.session_state.get("error"):
        st.error(st.session_state.error)
    elif not has_enabled_category(options):
        st.warning("Select at least one character category.", icon="⚠️")

    st.code(password, language=None)

    report = estimate_strength(password, options)
    st.markdown(
        f"**Strength:** <span style='color:{COLORS[report['score']]}'>"
        f"{report['label']}</span> &nbsp;·&nbsp; {report['bits']:.1f} bits",
        unsafe_allow_html=True,
    )
    st.markdown(_strength_bar(report), unsafe_allow_html=True)
    st.caption("Entropy-based estimate. Longer and more varied passwords are stronger.")

# ── Tips ──────────────────────────────────────────────────────────────────

with col_tips:
    st.markdown("**Smart tips**")
    for title, desc in TIPS:
        st.markdown(f"**{title}**  \n{desc}")

# ── Footer ────────────────────────────────────────────────────────────────

st.divider()
st.caption(
    f"© {datetime.date.today().year} HoloPass • Built with Streamlit"
    " &nbsp;·&nbsp; Privacy • Terms"
)
