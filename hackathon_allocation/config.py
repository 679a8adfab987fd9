# hackathon_allocation/config.py

# Skill matcher weights
EXACT_MATCH_WEIGHT = 1.0
PARTIAL_MATCH_WEIGHT = 0.5

# Mentor load balancing: subtracted once per submission already assigned
WORKLOAD_PENALTY = 0.1

# Room form limits
MIN_SEATS_PER_ROW = 1
MAX_SEATS_PER_ROW = 20
MIN_ROWS = 1
MAX_ROWS = 20

# Export formatting
LIST_SEPARATOR = "; "
MATCH_SCORE_DECIMALS = 2

# Optional prefix for submission PDF links in exports, e.g.
# "https://example.org/get-pdf/". None disables the column.
PDF_BASE_URL = None

# Toy data knobs
NUM_MENTORS_DEFAULT = 6
NUM_SUBMISSIONS_DEFAULT = 12
NUM_ROOMS_DEFAULT = 2
NUM_TEAMS_DEFAULT = 12
SKILLS_PER_MENTOR = 3
KEYWORDS_PER_SUBMISSION_MAX = 5
MAX_TEAM_SIZE_DEFAULT = 4

# Skill vocabulary for toy mentors and submissions
DEFAULT_SKILLS = [
    "Python", "Machine Learning", "ML", "React", "CSS", "HTML",
    "Node.js", "TensorFlow", "Blockchain", "IoT", "Flutter",
    "Cloud", "AWS", "Data Science", "Cybersecurity", "UI/UX",
]

# Random seed for reproducible toy sets
DEFAULT_SEED = 42

# CBC time limit for the exact row-packing benchmark
MILP_TIME_LIMIT_SECONDS = 10

# Scripts read the log level from this environment variable
LOG_LEVEL_ENV_VAR = "HACKALLOC_LOG_LEVEL"
