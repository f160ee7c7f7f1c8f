"""Schematic SVG illustrations, resolved by a term's illustration handle."""

import streamlit as st


ILLUSTRATIONS = {
    "phishing": """
<svg viewBox="0 0 120 80" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#4f46e5">
  <rect x="4" y="8" width="112" height="56" rx="6" fill="none" stroke="currentColor" stroke-width="2" opacity="0.3" />
  <path d="M12 24h96M12 44h64" stroke="currentColor" stroke-width="1.8" opacity="0.4" />
  <g transform="translate(20,34)">
    <path d="M0 0c6-6 12-6 18 0" stroke="currentColor" stroke-width="2" fill="none" />
    <rect x="8" y="-10" width="44" height="20" rx="3" fill="currentColor" opacity="0.1" />
  </g>
  <text x="10" y="20" font-size="7" fill="currentColor" opacity="0.5">e-mail</text>
</svg>
""",
    "firewall": """
<svg viewBox="0 0 120 80" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#4f46e5">
  <rect x="8" y="8" width="104" height="64" rx="10" fill="none" stroke="currentColor" stroke-width="1.6" opacity="0.3" />
  <path d="M20 40c8-14 32-22 64-8" stroke="currentColor" stroke-width="2" fill="none" opacity="0.45" />
  <circle cx="40" cy="44" r="10" stroke="currentColor" stroke-width="1.8" fill="none" opacity="0.4" />
</svg>
""",
    "two_factor": """
<svg viewBox="0 0 120 80" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#4f46e5">
  <rect x="14" y="18" width="28" height="36" rx="6" fill="none" stroke="currentColor" stroke-width="1.6" opacity="0.3" />
  <rect x="64" y="20" width="36" height="32" rx="6" fill="none" stroke="currentColor" stroke-width="1.6" opacity="0.3" />
  <path d="M28 30v14" stroke="currentColor" stroke-width="2" opacity="0.45" />
  <circle cx="82" cy="36" r="4" fill="currentColor" opacity="0.45" />
</svg>
""",
    "malware": """
<svg viewBox="0 0 120 80" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#4f46e5">
  <circle cx="60" cy="40" r="18" fill="none" stroke="currentColor" stroke-width="2" opacity="0.4" />
  <path d="M60 14v8M60 58v8M34 40h8M78 40h8M42 22l6 6M72 52l6 6M42 58l6-6M72 28l6-6" stroke="currentColor" stroke-width="1.8" opacity="0.35" />
</svg>
""",
    "network": """
<svg viewBox="0 0 120 80" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#4f46e5">
  <circle cx="24" cy="40" r="8" fill="none" stroke="currentColor" stroke-width="1.8" opacity="0.4" />
  <circle cx="96" cy="20" r="8" fill="none" stroke="currentColor" stroke-width="1.8" opacity="0.4" />
  <circle cx="96" cy="60" r="8" fill="none" stroke="currentColor" stroke-width="1.8" opacity="0.4" />
  <path d="M32 38l56-16M32 42l56 16" stroke="currentColor" stroke-width="1.6" opacity="0.3" />
</svg>
""",
}

# Shown when there is no term selected, or the handle is unknown
PLACEHOLDER = """
<svg viewBox="0 0 120 90" xmlns="http://www.w3.org/2000/svg" style="width:{width}px;color:#818cf8">
  <rect x="6" y="10" width="108" height="70" rx="12" fill="none" stroke="currentColor" stroke-width="1.6" opacity="0.3" />
  <path d="M22 44h76" stroke="currentColor" stroke-width="1.6" opacity="0.4" />
</svg>
"""


def get_illustration(handle, width=96) -> str:
    """Return the SVG markup for an illustration handle, or the placeholder."""
    template = ILLUSTRATIONS.get(handle, PLACEHOLDER)
    return template.replace("{width}", str(width))


def render_illustration(handle, width=96):
    """Render an illustration inline."""
    st.markdown(get_illustration(handle, width), unsafe_allow_html=True)
