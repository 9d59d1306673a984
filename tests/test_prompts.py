from app.services.prompts import build_resume_prompt


def test_prompt_interpolates_trimmed_fields():
    prompt = build_resume_prompt("  Data engineer, 5 years  ", "\nBuild pipelines on Spark and Airflow\n")
    assert "USER PROFILE:\nData engineer, 5 years\n" in prompt
    assert "JOB DESCRIPTION:\nBuild pipelines on Spark and Airflow\n" in prompt


def test_prompt_asks_for_all_sections():
    prompt = build_resume_prompt("profile text", "job text")
    for section in (
        "1. PROFESSIONAL SUMMARY",
        "2. KEY ACHIEVEMENTS",
        "3. RELEVANT SKILLS",
        "4. ATS OPTIMIZATION NOTES",
    ):
        assert section in prompt
    assert "Quantifiable achievements" in prompt
    assert "ATS-friendly" in prompt


def test_prompt_is_deterministic_and_keeps_braces():
    a = build_resume_prompt("Uses {curly} braces", "Job with {placeholders} inside it")
    b = build_resume_prompt("Uses {curly} braces", "Job with {placeholders} inside it")
    assert a == b
    assert "Uses {curly} braces" in a
