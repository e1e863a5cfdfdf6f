"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from skill_screener.screen_classes.judge.llm.llm_client import LLMClient


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_mock_llm_patch(monkeypatch):
    """
    Core patching logic for LLMClient.

    Forces every LLMClient to use canned judge replies by default:
      - `test_mode=True`
      - `function_name="judge_resume"`
      - a placeholder API key so clients can be built without a `.env`

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
    """
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-anthropic-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "test-google-key")

    original_init = LLMClient.__init__

    def patched_init(self, *args, **kwargs):
        kwargs["test_mode"] = True
        if not kwargs.get("function_name"):
            kwargs["function_name"] = "judge_resume"
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMClient, "__init__", patched_init)
