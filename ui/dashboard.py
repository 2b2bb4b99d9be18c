# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
import pandas as pd
from config import API_URL
from parsers.pdf import pdf_to_text

SAMPLE_JD = (
    "Looking for a React Developer with 3+ years experience in TypeScript and Next.js. "
    "Location: Remote"
)
NO_FILTERS = {"minExperience": 0, "location": "", "maxSalary": 0}

# -------------------- CONFIG --------------------
st.set_page_config(page_title="JD Candidate Ranker", page_icon="🧑‍💼", layout="wide")
st.title("🧑‍💼 Job Description Candidate Ranker")

st.markdown(
    "Paste a job description, set optional filters, and rank the candidate pool by "
    "skill coverage and experience."
)


def to_lpa(amount) -> str:
    return f"₹{amount / 100000:.1f} LPA"


def process_job(jd_text: str, filters: dict):
    r = requests.post(
        f"{st.session_state.api_url}/api/process-job",
        json={"jobDescription": jd_text, "filters": filters},
        timeout=30,
    )
    return r


# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL

# Sample results are loaded once so the page is not empty on first visit
if "results" not in st.session_state:
    st.session_state.results = None
    try:
        r = process_job(SAMPLE_JD, NO_FILTERS)
        if r.status_code == 200:
            st.session_state.results = r.json()
        else:
            st.warning(f"⚠️ Sample results unavailable (HTTP {r.status_code}).")
    except requests.exceptions.RequestException as e:
        st.warning(f"⚠️ Could not load sample results: {e}")

left, right = st.columns(2)

# ==================== INPUT ====================
with left:
    st.subheader("Job Description")

    jd_file = st.file_uploader("📄 Upload Job Description (PDF, optional)", type=["pdf"])
    jd_text = ""
    if jd_file:
        with st.spinner("Extracting text from uploaded JD..."):
            jd_text = pdf_to_text(jd_file)
        if jd_text:
            st.success("✅ JD text extracted. You can review or edit it below.")
        else:
            st.error("❌ Could not read any text from that PDF.")

    with st.form("job_form"):
        jd_text = st.text_area(
            "Paste or Edit Job Description",
            value=jd_text,
            height=250,
            placeholder="Include required skills, years of experience, location, and salary range.",
        )

        st.markdown("#### Filters")
        min_exp = st.number_input("Minimum Experience (years)", min_value=0, value=0, step=1)
        location = st.text_input("Location", placeholder="e.g., San Francisco, Remote")
        max_salary = st.number_input("Max Salary (₹)", min_value=0, value=0, step=100000,
                                     help="e.g., 10000000 (1 Cr). 0 means no limit.")
        submitted = st.form_submit_button("🔍 Analyze & Rank")

    if submitted:
        if not jd_text.strip():
            st.warning("Please enter a job description.")
        else:
            filters = {
                "minExperience": int(min_exp),
                "location": location.strip(),
                "maxSalary": int(max_salary),
            }
            with st.spinner("Ranking candidates..."):
                try:
                    r = process_job(jd_text, filters)
                except requests.exceptions.RequestException as e:
                    st.error(f"❌ Connection error: {e}")
                    st.stop()

            if r.status_code == 200:
                st.session_state.results = r.json()
            else:
                try:
                    message = r.json().get("error", r.text)
                except ValueError:
                    message = r.text
                st.error(f"❌ Failed to analyze candidates: {message}")

# ==================== RESULTS ====================
with right:
    st.subheader("Ranked Candidates")
    results = st.session_state.results

    if not results or not results.get("rankedCandidates"):
        st.info("Waiting for input... Enter a job description and click **Analyze & Rank**.")
    else:
        jd = results["parsedJD"]
        with st.container(border=True):
            st.markdown("### 🧾 Extracted Requirements")
            st.markdown(f"**Skills:** {', '.join(jd['extractedSkills']) or 'None detected'}")
            st.markdown(f"**Min Experience:** {jd['minExperience']} years")
            if jd.get("location"):
                st.markdown(f"**Location:** {jd['location']}")
            if jd.get("maxSalary", 0) > 0:
                st.markdown(f"**Max Salary:** {to_lpa(jd['maxSalary'])}")

        ranked = results["rankedCandidates"]
        st.table(pd.DataFrame({
            "Rank": range(1, len(ranked) + 1),
            "Candidate": [c["name"] for c in ranked],
            "Score (%)": [c["score"] for c in ranked],
            "Experience": [c["experience"] for c in ranked],
            "Location": [c["location"] for c in ranked],
        }).set_index("Rank"))

        for idx, cand in enumerate(ranked, start=1):
            with st.expander(f"#{idx} 🧑 {cand['name']} — {cand['score']}% match"):
                st.caption(f"{cand['experience']} years experience • {cand['location']}")
                details = cand["matchDetails"]
                if details["matchedSkills"]:
                    st.markdown(f"**✅ Matched Skills:** {', '.join(details['matchedSkills'])}")
                if details["missingSkills"]:
                    st.markdown(f"**❌ Missing Skills:** {', '.join(details['missingSkills'])}")
                st.markdown(f"**💰 Salary Expectation:** {to_lpa(cand['salaryExpectation'])}")
                if cand.get("resumeText"):
                    st.markdown("**📜 Resume:**")
                    st.write(cand["resumeText"])
