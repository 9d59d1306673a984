# =============================================================================
# streamlit_app.py — AI Resume Snippet Generator: profile + job → resume text
# =============================================================================
# Run: streamlit run streamlit_app.py
# Backend: BACKEND_URL (default http://127.0.0.1:8000)
# =============================================================================

import os

import requests
import streamlit as st

# No trailing slash so paths like /api/generate work
BASE_URL = (os.environ.get("BACKEND_URL") or "http://127.0.0.1:8000").rstrip("/")
GENERATE_PATH = "/api/generate"
REQUEST_TIMEOUT = 90

# Client-side hint only; the backend enforces its own minimums
MIN_PROFILE_CHARS = 40
MIN_JOB_CHARS = 60


def is_form_valid(profile: str, job: str) -> bool:
    return len(profile.strip()) >= MIN_PROFILE_CHARS and len(job.strip()) >= MIN_JOB_CHARS


def error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if not isinstance(data, dict):
        return f"HTTP {response.status_code}"
    message = data.get("error") or f"HTTP {response.status_code}"
    details = data.get("details")
    return f"{message}: {details}" if details else message


def request_generation(profile: str, job: str) -> tuple[dict | None, str | None]:
    """POST to the backend. Returns (result, None) or (None, error message)."""
    url = f"{BASE_URL}{GENERATE_PATH}"
    payload = {"profile": profile.strip(), "job": job.strip(), "temperature": 0.7}
    try:
        r = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        return None, f"Request failed: {e}"
    if not r.ok:
        return None, error_message(r)
    return r.json(), None


def main() -> None:
    st.set_page_config(page_title="AI Resume Snippet Generator", layout="centered")
    st.title("AI Resume Snippet Generator")
    st.caption("Paste your profile and a job description to get an ATS-friendly resume snippet.")
    with st.sidebar:
        st.caption(f"Backend: `{BASE_URL}`")
        st.caption("Start both: `python run.py`")

    profile = st.text_area(
        "Your profile",
        placeholder=(
            "Describe your professional background, key skills, and notable achievements. "
            "Be specific about your experience, technologies you've worked with, and "
            "measurable outcomes you've delivered..."
        ),
        height=180,
    )
    st.caption(f"{len(profile.strip())} characters (minimum {MIN_PROFILE_CHARS})")

    job = st.text_area(
        "Job description",
        placeholder=(
            "Paste the complete job description including responsibilities, required skills, "
            "qualifications, and company information. The more detailed, the better the AI "
            "can tailor your resume..."
        ),
        height=220,
    )
    st.caption(f"{len(job.strip())} characters (minimum {MIN_JOB_CHARS})")

    if st.button("Generate", type="primary", disabled=not is_form_valid(profile, job)):
        with st.spinner("Generating your resume snippet..."):
            result, error = request_generation(profile, job)
        if error:
            st.error(error)
        elif result:
            st.divider()
            st.subheader("Your resume snippet")
            # st.code renders a copy-to-clipboard button
            st.code(result.get("text", ""), language=None)
            st.caption(f"Provider: {result.get('provider', '—')}")


if __name__ == "__main__":
    main()
