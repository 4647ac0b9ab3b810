# API version
VERSION = "0.1.0"

# Info for OpenAPI specification
TITLE = "Hackathon Submission API"
SUMMARY = "Team leaders log in with their Firebase account and submit project links once."
DESCRIPTION = """
### About this project

This is the API for the project submission step of the hackathon.

A team leader signs in with the Firebase account used at registration. Only leaders of confirmed teams get
a session token. With it, the leader submits the repository, slides and demo video links plus a project
description. Every team submits exactly once: repeating the request returns the first submission unchanged.

Team registrations are read from Firestore, submissions are stored in a Google Spreadsheet.

Backend is developed using FastAPI framework on Python.

Note: API is unstable. Endpoints and models may change in the future.
"""

LICENSE_INFO = {
    "name": "MIT License",
    "identifier": "MIT",
}

TAGS_INFO = [
    {"name": "Auth", "description": "Login and logout of team leaders."},
    {"name": "Teams", "description": "Team registration of the logged-in leader."},
    {"name": "Submissions", "description": "Project submission, once per team."},
]
