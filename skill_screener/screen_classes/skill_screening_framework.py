"""skill_screening_framework.py
Holds framework to orchestrate operation of TextExtractor(), DeterministicScorer()
and EnhancedScorer() and return a BatchReport.
"""
import threading
from typing import Optional, Sequence, Tuple

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.exceptions import ValidationError
from skill_screener.logging import LoggerFactory
from skill_screener.models import BatchReport

from skill_screener.screen_classes.text_extractor.text_extractor import TextExtractor
from skill_screener.screen_classes.judge.llm.llm_client import LLMClient
from skill_screener.screen_classes.judge.text_judge import TextJudge, build_text_judge
from skill_screener.screen_classes.skill_matcher.deterministic_scorer import DeterministicScorer
from skill_screener.screen_classes.skill_matcher.enhanced_scorer import EnhancedScorer

logger = LoggerFactory().get_logger(
    name="skill_screening_framework",
    logger_type="screening",
)


class SkillScreeningFramework:
    """
    Orchestrates a complete screening batch, from raw documents to a BatchReport.

    Combines:
        - ``TextExtractor`` (with :class:`PDFRenderer`, :class:`WordDocumentRenderer`, ...)
        - ``DeterministicScorer``
        - ``EnhancedScorer`` with a :class:`TextJudge`

    The judge is built once when the framework is created. Without an LLM API
    key it is an ``UnavailableTextJudge`` and every batch is scored
    deterministically.

    Parameters
    ----------
    lines_per_page : int, optional
        Lines per estimated page. Defaults to ``SCREENER_DEFAULTS.LINES_PER_PAGE``.
    max_file_size_mb : float, optional
        Maximum document size. Defaults to ``SCREENER_DEFAULTS.MAX_FILE_SIZE_MB``.
    threshold_percent : int, optional
        Eligibility threshold. Defaults to ``SCREENER_DEFAULTS.THRESHOLD_PERCENT``.
    context_radius : int, optional
        Context characters per side of each occurrence.
    judge_delay_seconds : float, optional
        Pause between judge calls.
    max_threads : int, optional
        Maximum concurrent judge calls.
    text_extractor : TextExtractor, optional
        Pre-built extractor (e.g. with a custom renderer).
    text_judge : TextJudge, optional
        Pre-built judge. When omitted one is built from ``llm_client`` or the environment.
    llm_client : LLMClient, optional
        A language model client instance used to build the judge.

    Example
    -------
    >>> framework = SkillScreeningFramework()
    >>> report = framework.run([(pdf_bytes, "jane.pdf")], "Python, SQL, Go")
    >>> report.eligible_count
    1
    """

    def __init__(
        self,
        lines_per_page: int = SCREENER_DEFAULTS.LINES_PER_PAGE,
        max_file_size_mb: Optional[float] = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB,
        threshold_percent: int = SCREENER_DEFAULTS.THRESHOLD_PERCENT,
        context_radius: int = SCREENER_DEFAULTS.CONTEXT_RADIUS,
        judge_delay_seconds: float = SCREENER_DEFAULTS.JUDGE_DELAY_SECONDS,
        max_threads: int = SCREENER_DEFAULTS.MAX_THREADS,
        text_extractor: Optional[TextExtractor] = None,
        text_judge: Optional[TextJudge] = None,
        llm_client: Optional[LLMClient] = None,
    ):
        self.text_extractor = text_extractor or TextExtractor(
            lines_per_page=lines_per_page,
            max_file_size_mb=max_file_size_mb,
        )
        self.deterministic_scorer = DeterministicScorer(
            threshold_percent=threshold_percent,
            context_radius=context_radius,
        )
        self.enhanced_scorer = EnhancedScorer(
            deterministic_scorer=self.deterministic_scorer,
            judge_delay_seconds=judge_delay_seconds,
            max_threads=max_threads,
        )

        if text_judge is not None and not isinstance(text_judge, TextJudge):
            raise TypeError("Provided text_judge must be an instance of TextJudge.")
        self.text_judge = text_judge or build_text_judge(
            llm_client=llm_client,
            threshold_percent=threshold_percent,
        )

    @property
    def judge_available(self) -> bool:
        """Whether batches can be re-scored by the semantic judge."""
        return self.text_judge.available

    def run(
        self,
        documents: Sequence[Tuple[bytes, Optional[str]]],
        required_skills: str,
        use_enhanced: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> BatchReport:
        """
        Full pipeline: validate → extract every document → score → ``BatchReport``.

        Args:
            documents (Sequence[Tuple[bytes, str | None]]): ``(content, file_name)``
                pairs. A missing file name is reported as ``"Resume {n}"``.
            required_skills (str): Comma-separated required skills.
            use_enhanced (bool): Re-score with the semantic judge when available.
            cancel_event (threading.Event | None): Abandons pending judge calls when set.

        Returns:
            BatchReport: Results in input order with the derived eligible count.

        Raises:
            ValidationError: If no documents or no skills were provided.
            ExtractionError: If any document cannot be converted to text.
            ScreeningCancelledError: If `cancel_event` was set mid-batch.
        """
        self._validate_request(documents, required_skills)

        file_names = [
            file_name or f"Resume {index + 1}"
            for index, (_, file_name) in enumerate(documents)
        ]

        enhanced = use_enhanced and self.judge_available
        logger.info(
            f"Processing {len(documents)} resumes for skills: {required_skills} "
            f"(mode: {'enhanced' if enhanced else 'basic'})"
        )

        # A single extraction failure fails the whole batch. The caller's own
        # file name (not the "Resume N" label) selects the renderer.
        resume_texts = [
            self.text_extractor.extract(document_bytes, file_name)
            for document_bytes, file_name in documents
        ]

        if enhanced:
            results = self.enhanced_scorer.score_all(
                resume_texts=resume_texts,
                required_skills=required_skills,
                file_names=file_names,
                judge=self.text_judge,
                cancel_event=cancel_event,
            )
        else:
            results = [
                self.deterministic_scorer.score(text, required_skills, file_name)
                for text, file_name in zip(resume_texts, file_names)
            ]

        report = BatchReport(results=results)
        logger.info(
            f"Screened {report.total_resumes} resumes, {report.eligible_count} eligible."
        )
        return report

    def _validate_request(
        self,
        documents: Sequence[Tuple[bytes, Optional[str]]],
        required_skills: str,
    ) -> None:
        """
        Raises:
            ValidationError: If `documents` is empty or `required_skills` is blank.
        """
        if not documents:
            raise ValidationError("No resume documents were provided.")

        if not isinstance(required_skills, str) or not required_skills.strip():
            raise ValidationError("Required skills were not provided.")
