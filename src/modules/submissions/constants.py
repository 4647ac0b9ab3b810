MAX_URL_LENGTH = 2048
MAX_DESCRIPTION_LENGTH = 5000
ALLOWED_URL_SCHEMES = {"http", "https"}
LINK_FIELDS = ("githubLink", "pptLink", "videoLink")

# Fixed, always UTC
SUBMISSION_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Column order of the submissions sheet, A to J
SHEET_HEADER = [
    "Submission Time",
    "Team name",
    "Team id",
    "Leader name",
    "Leader's phone",
    "Leader's email",
    "Github link",
    "PPT link",
    "Video link",
    "Description",
]
TEAM_ID_COLUMN = 2
