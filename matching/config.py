"""
Scoring configuration for candidate ranking.
Adjust weights and filter switches here.
"""

# Component weights (points, must sum to 100)
WEIGHTS = {
    "skills": 60,
    "experience": 40,
}

MAX_SCORE = 100

# A location filter containing this token admits every candidate,
# whatever their location.
REMOTE_TOKEN = "remote"
REMOTE_LOCATION_BYPASS = True
