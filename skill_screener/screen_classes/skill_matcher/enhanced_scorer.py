"""enhanced_scorer.py
Re-scores resumes with a semantic judge, falling back to the deterministic
result for any resume the judge cannot handle.
"""
import threading
import time
import warnings
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import List, Optional, Sequence

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.exceptions import ScreeningCancelledError
from skill_screener.logging import LoggerFactory
from skill_screener.models import ResumeResult, StructuredText

from skill_screener.screen_classes.judge.text_judge import TextJudge
from skill_screener.screen_classes.skill_matcher.deterministic_scorer import DeterministicScorer

logger_factory = LoggerFactory()
logger = logger_factory.get_logger(name="enhanced_scorer", logger_type="screening")
judge_failure_logger = logger_factory.get_logger(
    name="judge_failures",
    logger_type="judge_failures"
)


class _JudgePacer:
    """Spaces the start of successive judge calls at least `delay_seconds` apart."""

    def __init__(self, delay_seconds: float):
        self.delay_seconds = delay_seconds
        self._lock = threading.Lock()
        self._next_start: Optional[float] = None

    def wait(self) -> None:
        with self._lock:
            now = time.monotonic()
            if self._next_start is None or self._next_start <= now:
                start = now
            else:
                start = self._next_start
            self._next_start = start + self.delay_seconds
        if start > now:
            time.sleep(start - now)


class EnhancedScorer:
    """
    Delegates scoring to a TextJudge, resume by resume.

    The deterministic result is always computed first. It is both the fallback
    and the source of the per-skill evidence, line count and page estimate. When
    the judge succeeds only `match_percentage`, `eligible` and `summary` are
    taken from its verdict. A failure for one resume is logged and that resume
    keeps its deterministic result; other resumes are unaffected.

    Judge calls run sequentially by default. With `max_threads` > 1 they run in
    a bounded thread pool; call starts stay `judge_delay_seconds` apart and
    results keep input order either way.

    Args:
        deterministic_scorer (DeterministicScorer | None): Scorer used for the
            baseline. Defaults to a scorer built with SCREENER_DEFAULTS.
        judge_delay_seconds (float): Pause between successive judge calls.
        max_threads (int): Maximum concurrent judge calls.
    """

    def __init__(
        self,
        deterministic_scorer: Optional[DeterministicScorer] = None,
        judge_delay_seconds: float = SCREENER_DEFAULTS.JUDGE_DELAY_SECONDS,
        max_threads: int = SCREENER_DEFAULTS.MAX_THREADS,
    ):
        self.deterministic_scorer = deterministic_scorer or DeterministicScorer()
        self.judge_delay_seconds = judge_delay_seconds
        self._determine_max_threads(max_threads)

    def _determine_max_threads(self, max_threads: int) -> None:
        """Validate and set `self.max_threads`."""
        if max_threads <= 0:
            warnings.warn(f"Requested max_threads={max_threads} is invalid. Defaulting to 1 thread.")
            max_threads = 1
        self.max_threads = max_threads

    def score_all(
        self,
        resume_texts: Sequence[StructuredText],
        required_skills: str,
        file_names: Sequence[str],
        judge: TextJudge,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[ResumeResult]:
        """
        Score every resume, using the judge where possible.

        Args:
            resume_texts (Sequence[StructuredText]): Extracted resume texts.
            required_skills (str): Comma-separated required skills.
            file_names (Sequence[str]): File names, index-aligned with `resume_texts`.
            judge (TextJudge): Semantic judge. If it is not available every
                resume is scored deterministically.
            cancel_event (threading.Event | None): When set, pending judge calls
                are abandoned.

        Returns:
            List[ResumeResult]: One result per resume, in input order.

        Raises:
            ValueError: If `resume_texts` and `file_names` differ in length.
            ScreeningCancelledError: If `cancel_event` is set before all
                resumes were judged.
        """
        if len(resume_texts) != len(file_names):
            raise ValueError(
                f"Got {len(resume_texts)} resume texts but {len(file_names)} file names."
            )

        baseline_results = [
            self.deterministic_scorer.score(text, required_skills, file_name)
            for text, file_name in zip(resume_texts, file_names)
        ]

        if not judge.available:
            logger.info("Semantic judge unavailable, using deterministic scores for the whole batch.")
            return baseline_results

        pacer = _JudgePacer(self.judge_delay_seconds)
        jobs = list(zip(resume_texts, baseline_results))

        def check_cancelled(index: int) -> None:
            if cancel_event is not None and cancel_event.is_set():
                raise ScreeningCancelledError(completed=index, total=len(jobs))

        def run_job(index: int) -> ResumeResult:
            check_cancelled(index)
            pacer.wait()
            check_cancelled(index)
            resume_text, baseline = jobs[index]
            return self._judge_resume(resume_text, required_skills, baseline, judge, index)

        if self.max_threads == 1:
            return [run_job(index) for index in range(len(jobs))]

        with ThreadPoolExecutor(max_workers=min(self.max_threads, len(jobs))) as executor:
            futures = [executor.submit(run_job, index) for index in range(len(jobs))]
            try:
                # Collect in submission order to keep input order
                return [future.result() for future in futures]
            except ScreeningCancelledError:
                for future in futures:
                    future.cancel()
                raise

    def _judge_resume(
        self,
        resume_text: StructuredText,
        required_skills: str,
        baseline: ResumeResult,
        judge: TextJudge,
        index: int,
    ) -> ResumeResult:
        """
        Apply the judge's verdict to one baseline result.

        Returns `baseline` unchanged if the judge raises for any reason.
        """
        try:
            verdict = judge.judge(resume_text.full_text, required_skills)
        except Exception as e:
            judge_failure_logger.warning(
                f"Judge failed for resume {index + 1} (`{baseline.file_name}`), "
                f"using deterministic score: {e}"
            )
            return baseline

        return replace(
            baseline,
            match_percentage=verdict.overall_score,
            eligible=verdict.eligible,
            summary=verdict.summary,
        )
