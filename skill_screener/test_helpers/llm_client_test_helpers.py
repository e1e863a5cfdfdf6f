"""llm_client_test_helpers.py
Canned LLM replies used by LLMClient when running in test mode.
"""

from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

expected_test_responses = {
    "judge_resume": {
        "success": {
            "overall_score": 85,
            "eligible": True,
            "summary": "Strong Python and SQL background with production experience."
        },
        "fenced": (
            "```json\n"
            "{\"overall_score\": 42, \"eligible\": false, "
            "\"summary\": \"Only a passing mention of the required stack.\"}\n"
            "```"
        ),
        "failed": {"overall_score": None, "eligible": None, "summary": None},
        "unexpected_json": {"candidate_rating": "It's a great resume!"},
        "not_json": "This candidate looks like a good fit overall.",
    }
}

def create_mock_llm_response(
    function_name: Literal["judge_resume"],
    provider: Literal["anthropic", "google"],
    response_type: Literal["success", "fenced", "failed", "unexpected_json", "not_json"] = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict responses to JSON string; leave strings as-is
    content = json.dumps(content_value) if isinstance(content_value, dict) else content_value

    # --- token counts ---
    input_tokens = random.randint(50, 150)
    output_tokens = random.randint(20, 100)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    elif provider == "google":
        response_metadata = {
            "model_name": "gemini-1.5-flash",
            "finish_reason": "STOP",
            "safety_ratings": [],
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
