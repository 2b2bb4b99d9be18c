"""
Skill catalog and extraction patterns for job descriptions.

Order matters everywhere in this module: skills are reported in catalog
order and, for each field, the first pattern that matches wins.
"""
import re

# Digits and letters in the patterns are ASCII only
_FLAGS = re.IGNORECASE | re.ASCII

# Known technology terms, matched as case-insensitive substrings
TECH_KEYWORDS = [
    "React", "Next.js", "Node.js", "TypeScript", "JavaScript", "Java",
    "Python", "Django", "FastAPI", "Spring Boot", "Express",
    "SQL", "MySQL", "PostgreSQL", "MongoDB", "Redis",
    "GraphQL", "REST API", "Docker", "Kubernetes", "AWS", "Azure", "GCP",
    "HTML", "CSS", "Tailwind CSS", "Bootstrap",
    "Vue.js", "Angular", "Svelte",
    "Git", "CI/CD", "Jenkins", "Microservices", "Kafka",
    "Testing", "Jest", "Cypress", "Selenium",
    "Agile", "Scrum", "Figma", "UI/UX",
]

# "5 years", "5+ years", "minimum 5 years", "at least 5 years", "5 years experience"
EXPERIENCE_PATTERNS = [
    re.compile(r"(\d+)\s*\+?\s*years?", _FLAGS),
    re.compile(r"minimum\s+(\d+)\s*years?", _FLAGS),
    re.compile(r"at least\s+(\d+)\s*years?", _FLAGS),
    re.compile(r"(\d+)\s*years?\s+experience", _FLAGS),
]

LOCATION_PATTERNS = [
    re.compile(r"location[:\s]+([A-Za-z\s]+)", _FLAGS),
    re.compile(r"based in[:\s]+([A-Za-z\s]+)", _FLAGS),
    re.compile(r"(remote|hybrid|on-?site)", _FLAGS),
]

# Salary pattern kinds
GROUPED = "grouped"  # $120,000,000 -> three digit groups joined
THOUSANDS = "thousands"  # 120k -> 120 * 1000
PLAIN = "plain"  # salary: 120000

SALARY_PATTERNS = [
    (re.compile(r"\$?\s*(\d{1,3}),?(\d{3}),?(\d{3})", re.ASCII), GROUPED),
    (re.compile(r"\$?\s*(\d{1,3})k", _FLAGS), THOUSANDS),
    (re.compile(r"salary[:\s]+\$?(\d+)", _FLAGS), PLAIN),
]
