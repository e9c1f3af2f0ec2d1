"""Custom CSS for the dashboard."""


def get_custom_css() -> str:
    return """
    <style>
    .block-container { padding-top: 2rem; max-width: 1200px; }
    div[data-testid="stMetric"] {
        background: #ffffff;
        border: 1px solid #e2e8f0;
        border-radius: 12px;
        padding: 0.75rem 1rem;
    }
    .section-title { font-weight: 600; font-size: 1.05rem; margin: 0.5rem 0; }
    .muted { color: #475569; font-size: 0.9rem; }
    </style>
    """
