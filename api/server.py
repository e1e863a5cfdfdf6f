"""server.py
Server to launch a FastAPI / Swagger UI instance.
"""
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.exceptions import ExtractionError, FileTooLargeError, ValidationError
from skill_screener.logging import LoggerFactory
from skill_screener.screen_classes.skill_screening_framework import SkillScreeningFramework


app = FastAPI(title="Skill Screener API", version="1.0")

logger = LoggerFactory().get_logger(name="api_server", logger_type="default")

# Initiate SkillScreeningFramework (and its semantic judge) once for the process
skill_screening_framework = SkillScreeningFramework()

@app.post(
    "/api/skills-check",
    summary="Screen resumes against a list of required skills",
    description=(
        "Uploads one or more resumes (PDF, DOCX or TXT) and a comma-separated skill list, "
        "and returns per-resume eligibility, matched skills with context, and missing skills."
    ),
)
async def skills_check(
    resumes: List[UploadFile] = File(default=[]),
    skills: str = Form(default=""),
    use_ai: bool = Form(default=True),
) -> dict:
    """
    Screen uploaded resumes and return the BatchReport as JSON.
    """
    # ---- Validate file size before reading everything into the pipeline ----
    max_bytes = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB * 1024 * 1024
    documents = []
    for upload in resumes:
        contents = await upload.read()
        if len(contents) > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=(
                    f"File `{upload.filename}` too large. "
                    f"Max allowed size is {SCREENER_DEFAULTS.MAX_FILE_SIZE_MB} MB."
                ),
            )
        documents.append((contents, upload.filename))

    try:
        report = skill_screening_framework.run(
            documents=documents,
            required_skills=skills,
            use_enhanced=use_ai,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=422, detail=f"Skills analysis failed: {e}")
    except Exception as e:
        logger.exception("Skills check error")
        raise HTTPException(status_code=500, detail=f"Skills analysis failed: {e}")

    return {"success": True, **report.to_dict()}


@app.get("/api/health", summary="Report server status and semantic judge availability")
async def health() -> dict:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "ai_enabled": skill_screening_framework.judge_available,
    }
