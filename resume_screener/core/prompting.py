from typing import Tuple

SYSTEM_PROMPT = (
    "You are an expert technical recruiter and resume screener. "
    "Compare a resume to a job description and score the match objectively. "
    "Only respond with a single valid JSON object matching the required schema. "
    "No prose, no markdown, no code fences."
)

SCHEMA_DESCRIPTION = """{
  "score": number between 0 and 100,
  "strengths": string[],
  "missingSkills": string[],
  "suggestions": string[]
}"""

def build_user_prompt(resume_text: str, job_description: str) -> str:
    return f"""Required JSON schema (no additional keys):
{SCHEMA_DESCRIPTION}

Instructions:
- Score based on relevance of skills, experience, tools, and responsibilities.
- strengths: concrete and specific matches.
- missingSkills: important skills from the job description that are not clearly present in the resume.
- suggestions: actionable, brief improvements to increase the score.
- Output ONLY the JSON object and ensure it is strictly valid JSON.

Resume:
\"\"\"
{resume_text}
\"\"\"

Job Description:
\"\"\"
{job_description}
\"\"\"
"""

def build_prompts(resume_text: str, job_description: str) -> Tuple[str, str]:
    """Return (system_instruction, user_prompt) for one screening request."""
    return SYSTEM_PROMPT, build_user_prompt(resume_text, job_description)
