from resume_screener.core.prompting import SYSTEM_PROMPT, build_prompts


def test_texts_embedded_verbatim():
    resume = "Jane Doe\n  - Python {braces} and \"quotes\""
    jd = "Looking for a Python developer with AWS experience"
    system, user = build_prompts(resume, jd)

    assert system == SYSTEM_PROMPT
    assert f'Resume:\n"""\n{resume}\n"""' in user
    assert f'Job Description:\n"""\n{jd}\n"""' in user


def test_schema_and_format_rules():
    system, user = build_prompts("r", "j")
    for key in ('"score"', '"strengths"', '"missingSkills"', '"suggestions"'):
        assert key in user
    assert "no markdown" in system.lower()
    assert "Output ONLY the JSON object" in user


def test_deterministic():
    assert build_prompts("a", "b") == build_prompts("a", "b")
