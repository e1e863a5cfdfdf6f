"""text_judge.py
Semantic judge capability used by the EnhancedScorer.

A TextJudge rates a whole resume against the required skills and returns a
JudgeVerdict. Whether the enhancement is available at all is a property of the
injected judge, so scoring code never checks for a missing LLM client itself.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.exceptions import JudgeError, LLMError, LLMInitializationError
from skill_screener.logging import LoggerFactory
from skill_screener.models import JudgeVerdict

from skill_screener.screen_classes.judge.llm.llm_client import LLMClient
from skill_screener.screen_classes.judge.llm.llm_helpers import initialize_llm_if_available

logger = LoggerFactory().get_logger(
    name="text_judge",
    logger_type="screening",
)

JUDGE_SYSTEM_PROMPT = (
    "You are a recruiting assistant. Your task is to rate how well a resume matches "
    "a list of required skills.\n\n"
    "Instructions:\n"
    "1. Judge the whole resume, including skills that are implied by experience.\n"
    "2. Rate the overall match as a whole number from 0 to 100.\n"
    "3. The candidate is eligible when the overall match is {threshold} or higher.\n"
    "4. Keep the summary to one or two sentences.\n"
    "5. Return your output strictly as a valid JSON object.\n"
    "6. Use the following format:\n\n"
    "{{\n"
    "  \"overall_score\": 85,\n"
    "  \"eligible\": true,\n"
    "  \"summary\": \"brief summary\"\n"
    "}}\n\n"
    "Do not include any additional text, explanations, or formatting outside the JSON."
)

JUDGE_USER_PROMPT = (
    "Required skills: {skills}\n\n"
    "RESUME:\n{resume_text}"
)


def parse_judge_verdict(judge_response: Any) -> JudgeVerdict:
    """
    Validate a parsed judge reply and convert it into a JudgeVerdict.

    `overall_score` may be an int or float in [0, 100] (floats are rounded
    half-up), `eligible` must be a bool and `summary` a string.

    Raises:
        JudgeError: If the reply is not a dict, a field is missing, has the wrong
            type, or the score is out of range.
    """
    if not isinstance(judge_response, dict):
        raise JudgeError(
            message=f"Judge did not return a JSON object (got {type(judge_response).__name__})",
            raw_response=judge_response,
        )

    for field_name in ("overall_score", "eligible", "summary"):
        if field_name not in judge_response:
            raise JudgeError(
                message=f"Judge JSON missing expected field `{field_name}`",
                raw_response=judge_response,
            )

    overall_score = judge_response["overall_score"]
    eligible = judge_response["eligible"]
    summary = judge_response["summary"]

    # bool is a subclass of int and is never a valid score
    if isinstance(overall_score, bool) or not isinstance(overall_score, (int, float)):
        raise JudgeError(
            message=f"Judge field `overall_score` must be a number (got {type(overall_score).__name__})",
            raw_response=judge_response,
        )
    if not 0 <= overall_score <= 100:
        raise JudgeError(
            message=f"Judge field `overall_score` out of range 0-100 (got {overall_score})",
            raw_response=judge_response,
        )
    if not isinstance(eligible, bool):
        raise JudgeError(
            message=f"Judge field `eligible` must be a boolean (got {type(eligible).__name__})",
            raw_response=judge_response,
        )
    if not isinstance(summary, str):
        raise JudgeError(
            message=f"Judge field `summary` must be a string (got {type(summary).__name__})",
            raw_response=judge_response,
        )

    return JudgeVerdict(
        overall_score=int(overall_score + 0.5),
        eligible=eligible,
        summary=summary,
    )


class TextJudge(ABC):
    """
    Abstract semantic judge.

    Attributes:
        available (bool): False when the judge cannot be used and every resume
            should be scored deterministically.
    """
    available: bool = True

    @abstractmethod
    def judge(self, full_text: str, required_skills: str) -> JudgeVerdict:
        """
        Rate one resume.

        Raises:
            JudgeError: On any failure to obtain or parse a verdict.
        """
        pass


class UnavailableTextJudge(TextJudge):
    """Judge used when no LLM is configured."""
    available = False

    def __init__(self, reason: str = "No semantic judge configured"):
        self.reason = reason

    def judge(self, full_text: str, required_skills: str) -> JudgeVerdict:
        raise JudgeError(message=self.reason)


class LLMTextJudge(TextJudge):
    """
    Semantic judge backed by an LLMClient.

    Args:
        llm_client (LLMClient): Initialized client used for every query.
        threshold_percent (int): Eligibility threshold stated in the prompt.
        temperature (float): Sampling temperature for judge queries.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        threshold_percent: int = SCREENER_DEFAULTS.THRESHOLD_PERCENT,
        temperature: float = 0.0,
    ):
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        self.llm_client = llm_client
        self.threshold_percent = threshold_percent
        self.temperature = temperature

    def judge(self, full_text: str, required_skills: str) -> JudgeVerdict:
        """
        Ask the LLM for a verdict on one resume.

        Raises:
            JudgeError: If the query fails or the reply is not a usable verdict.
        """
        try:
            judge_response = self.llm_client.query(
                system_prompt=JUDGE_SYSTEM_PROMPT.format(threshold=self.threshold_percent),
                user_prompt=JUDGE_USER_PROMPT.format(
                    skills=required_skills,
                    resume_text=full_text,
                ),
                temperature=self.temperature,
                expect_json=True,
            )
        except LLMError as e:
            raise JudgeError(message=f"Judge query failed: {e}") from e

        return parse_judge_verdict(judge_response)


def build_text_judge(
    llm_client: Optional[LLMClient] = None,
    threshold_percent: int = SCREENER_DEFAULTS.THRESHOLD_PERCENT,
) -> TextJudge:
    """
    Build the judge for this process from an explicit client or the environment.

    Returns an ``UnavailableTextJudge`` when no API key is configured or the
    LLM client cannot be created.
    """
    try:
        llm_client = initialize_llm_if_available(llm_client=llm_client)
    except LLMInitializationError as e:
        logger.warning(f"Semantic judge disabled, LLM client failed to initialize: {e}")
        return UnavailableTextJudge(reason=str(e))

    if llm_client is None:
        logger.info("Semantic judge disabled, no LLM API key configured.")
        return UnavailableTextJudge()

    logger.info(
        f"Semantic judge enabled (provider: {llm_client.provider}, model: {llm_client.model})."
    )
    return LLMTextJudge(llm_client=llm_client, threshold_percent=threshold_percent)
