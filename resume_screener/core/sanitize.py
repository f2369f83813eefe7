import json
import math
import re
from typing import Any, List

from resume_screener.core.errors import InvalidOutputError, NonJsonOutputError
from resume_screener.schemas import AnalysisResult

LIST_FIELDS = ("strengths", "missingSkills", "suggestions")

_FENCE_OPEN = re.compile(r"^```(?:json)?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"```$")
_OBJECT_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


def strip_code_fences(raw: str) -> str:
    cleaned = _FENCE_OPEN.sub("", raw.strip(), count=1)
    cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_model_json(raw: str) -> Any:
    """
    Models sometimes wrap the JSON in fences or surround it with prose.
    We try:
      1) json.loads on the fence-stripped text
      2) json.loads on the first '{' .. last '}' block
    and give up with NonJsonOutputError otherwise.
    """
    cleaned = strip_code_fences(raw or "")

    try:
        return json.loads(cleaned)
    except ValueError:
        pass

    match = _OBJECT_BLOCK.search(cleaned)
    if match:
        try:
            return json.loads(match.group(0))
        except ValueError:
            pass

    raise NonJsonOutputError("AI returned non-JSON content. Please try again.")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def normalize_string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    out = []
    for item in value:
        if item is None:
            continue
        s = _stringify(item).strip()
        if s:
            out.append(s)
    return out


def normalize_score(value: Any) -> int:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOutputError("score must be a number", field="score")
    if isinstance(value, float) and math.isnan(value):
        raise InvalidOutputError("score must be a number", field="score")
    # clamp before float(): huge JSON integers overflow a float
    clamped = float(max(0, min(100, value)))
    # halves round up
    return int(math.floor(clamped + 0.5))


def validate_analysis(parsed: Any) -> AnalysisResult:
    if not isinstance(parsed, dict):
        raise InvalidOutputError("Not an object")

    score = normalize_score(parsed.get("score"))
    lists = {name: normalize_string_list(parsed.get(name)) for name in LIST_FIELDS}

    return AnalysisResult(score=score, **lists)


def sanitize_model_output(raw: str) -> AnalysisResult:
    return validate_analysis(parse_model_json(raw))
