"""config.py
Holds various defaults for different skill screener settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class ScreenerDefaults:
    """
    Default settings for parameters used across the skill_screener repo.
    """
    # ---- TextExtractor settings ----
    LINES_PER_PAGE: int = field(
        default = 50,
        metadata = {
            "description": "Number of lines assumed per page when estimating page numbers"
    })
    MAX_FILE_SIZE_MB: float = field(
        default = 10.0,
        metadata = {
            "description": "Maximum allowed document size in MB"
    })

    # ---- Scorer settings ----
    THRESHOLD_PERCENT: int = field(
        default = 60,
        metadata = {
            "description": "Minimum match percentage for a resume to be eligible"
    })
    CONTEXT_RADIUS: int = field(
        default = 30,
        metadata = {
            "description": "Characters of context kept on each side of a skill match"
    })

    # ---- EnhancedScorer settings ----
    JUDGE_DELAY_SECONDS: float = field(
        default = 0.5,
        metadata = {
            "description": "Pause between successive semantic judge calls (rate limiting)"
    })
    MAX_THREADS: int = field(
        default = 1,
        metadata = {
            "description": "Maximum number of concurrent judge calls (1 = sequential)"
    })

    # ---- LLMClient settings ----
    LLM_PROVIDER: str = field(
        default = "anthropic",
        metadata = {
            "description": 'LLM provider: "anthropic" or "google"'
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID"
    })
    GOOGLE_MODEL_ID: str = field(
        default = "gemini-1.5-flash",
        metadata = {
            "description": "Google Gemini model ID"
    })


# Import this where needed
SCREENER_DEFAULTS = ScreenerDefaults()
