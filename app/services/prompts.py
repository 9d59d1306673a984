# -----------------------------------------------------------------------------
# app/services/prompts.py — Resume snippet prompt (static template)
# -----------------------------------------------------------------------------

RESUME_PROMPT_TEMPLATE = """You are an expert resume writer and career coach. Generate a professional resume snippet based on the following information.

USER PROFILE:
{profile}

JOB DESCRIPTION:
{job}

Please provide a well-structured resume snippet with:

1. PROFESSIONAL SUMMARY (2-3 sentences that highlight key strengths and align with the job)
2. KEY ACHIEVEMENTS (3-4 bullet points with quantifiable results when possible)
3. RELEVANT SKILLS (extracted from both profile and job requirements)
4. ATS OPTIMIZATION NOTES (brief suggestions for keyword alignment)

Format your response in clear sections. Focus on:
- Quantifiable achievements and impact
- Keywords that match the job description
- Professional tone and compelling narrative
- ATS-friendly formatting suggestions

Make it specific, impactful, and tailored to this exact role."""


def build_resume_prompt(profile: str, job: str) -> str:
    return RESUME_PROMPT_TEMPLATE.format(profile=profile.strip(), job=job.strip())
