"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from typing import Dict, List, Optional, Union

from skill_screener.exceptions import JudgeError
from skill_screener.models import JudgeVerdict
from skill_screener.screen_classes.judge.text_judge import TextJudge
from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer


class DummyUpperCaseRenderer(DocumentRenderer):
    """Renders UTF-8 bytes upper-cased, to prove an injected renderer is used."""
    SUPPORTED_EXTENSIONS = [".dummy"]

    def _render_text(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        return document_bytes.decode("utf-8").upper()


class ScriptedJudge(TextJudge):
    """
    A TextJudge that replays a script of verdicts or exceptions, one per call.

    Each script entry is a JudgeVerdict to return or an Exception to raise.
    Every call's arguments are recorded in `calls`.
    """

    def __init__(self, script: List[Union[JudgeVerdict, Exception]], available: bool = True):
        self.script = list(script)
        self.available = available
        self.calls: List[Dict[str, str]] = []

    def judge(self, full_text: str, required_skills: str) -> JudgeVerdict:
        self.calls.append({"full_text": full_text, "required_skills": required_skills})
        if not self.script:
            raise JudgeError(message="ScriptedJudge ran out of scripted verdicts")
        outcome = self.script.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
