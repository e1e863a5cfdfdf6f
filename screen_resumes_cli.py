"""screen_resumes_cli.py
Run SkillScreeningFramework from the command line.
Example: `python screen_resumes_cli.py "Python, SQL, Go" path/to/resume.pdf path/to/other.docx`

Pass `--basic` to skip the semantic judge even when an LLM API key is configured.
"""
import sys
from pathlib import Path

from skill_screener.exceptions import ScreenerError
from skill_screener.models import BatchReport
from skill_screener.screen_classes.skill_screening_framework import SkillScreeningFramework


def main():
    args = [arg for arg in sys.argv[1:] if arg != "--basic"]
    use_enhanced = "--basic" not in sys.argv[1:]

    if len(args) < 2:
        print('Usage: python screen_resumes_cli.py "<skill, skill, ...>" <file_path> [<file_path> ...] [--basic]')
        sys.exit(1)

    required_skills, file_paths = args[0], args[1:]
    documents = [(Path(file_path).read_bytes(), Path(file_path).name) for file_path in file_paths]

    framework = SkillScreeningFramework()

    try:
        report: BatchReport = framework.run(documents, required_skills, use_enhanced=use_enhanced)
    except ScreenerError as e:
        print(f"Screening failed: {e}")
        sys.exit(1)

    print("Skill Screening Result:")
    print(f"Eligible: {report.eligible_count}/{report.total_resumes}")
    for result in report.results:
        status = "ELIGIBLE" if result.eligible else "NOT ELIGIBLE"
        print(f"\n{result.file_name}: {status} ({result.match_percentage}%)")
        print(f"  Summary: {result.summary}")
        for skill_match in result.matched:
            first = skill_match.occurrences[0]
            print(
                f"  + {skill_match.skill} x{skill_match.total_occurrences} "
                f"(line {first.line_number}, ~page {first.estimated_page}): \"{first.context}\""
            )
        print(f"  Missing: {', '.join(result.missing) if result.missing else 'None'}")


if __name__ == "__main__":
    main()
