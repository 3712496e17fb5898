"""
Configuration module for the portfolio page.
Holds the profile constants, environment loading, and logging setup.
"""

import pathlib
import os
from dataclasses import dataclass
from dotenv import load_dotenv
import logging
import sys

# Log to stderr so the MCP stdio transport stays clean
logging.basicConfig(
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stderr)],
    format="%(asctime)s [portfolio] %(message)s"
)

logger = logging.getLogger(__name__)

# Per-user settings directory (.env lives here)
# Default is ~/.portfolio_page
SETTINGS_DIR = pathlib.Path.home() / ".portfolio_page"

# Load environment variables (.env files)
# Strategy: 1. Project-level .env, then 2. Per-user .env
script_dir = pathlib.Path(__file__).parent
load_dotenv(script_dir / ".env")
load_dotenv(SETTINGS_DIR / ".env")

# ==== PROFILE ================================================================
NAME = "Harshvardhan Singh"
TAGLINE = "Engineer. Analyst. Integrator  • Bridging Tech and Operations  • Solving. Analyzing. Building"
GITHUB_USERNAME = "harshvar36"
LINKEDIN_URL = "https://www.linkedin.com/in/harshvardhan-singh-508a18319/"
EMAIL = "harshva36@gmail.com"
RESUME_URL = "https://drive.google.com/file/d/1LnTMMF7oAcGmyoKzEqvUbTy4Qs9jgUn6/view?usp=drive_link"
PHOTO_URL = "harshvardhan.JPG"

# Featured repo names pinned to the top grid (must match GitHub repo names exactly)
FEATURED = [
    "streamlit-iris-app-aiml",
]

ABOUT = [
    "I am an engineer driven by a fundamental curiosity for how systems work, from "
    "cutting-edge wireless networks to complex operational workflows.",
    "My experience is uniquely broad, spanning from theoretical research in Reconfigurable "
    "Intelligent Surfaces (RIS) to practical data analysis for maritime crew management.",
    "I thrive at the intersection of innovation, data, and operations. Whether it's optimizing "
    "a system, analyzing a dataset, or exploring a new technology, I am a persistent "
    "problem-solver who builds bridges between an idea and its real-world execution.",
]

INTERESTS = [
    "Innovation", "AI/ML", "Data Analysis", "DevOps", "Cloud Computing",
    "Wireless Communications", "Systems Design", "Operational Efficiency",
]

HIGHLIGHTS = [
    "Data-Driven Operational Analysis",
    "DevOps basics: GitHub Actions, Docker (learning)",
    "Versatile Cross-Domain Experience",
]

# ==== GITHUB FETCH ===========================================================
GITHUB_API_URL = "https://api.github.com"
REPO_PAGE_SIZE = 100  # Maximum allowed by GitHub API
REPO_SORT = "updated"
TOP_REPO_LIMIT = 9
REQUEST_TIMEOUT = 10


@dataclass(frozen=True)
class Profile:
    """Everything the page shows about its owner."""

    name: str
    tagline: str
    username: str
    linkedin_url: str
    email: str
    resume_url: str
    photo_url: str
    about: tuple
    interests: tuple
    highlights: tuple

    @property
    def github_url(self):
        return f"https://github.com/{self.username}"


def get_output_dir():
    """Returns the directory the rendered page is written to."""
    return pathlib.Path(os.getenv("PORTFOLIO_OUTPUT_DIR", "site"))


def get_profile():
    """Returns the configured profile."""
    return Profile(
        name=NAME,
        tagline=TAGLINE,
        username=GITHUB_USERNAME,
        linkedin_url=LINKEDIN_URL,
        email=EMAIL,
        resume_url=RESUME_URL,
        photo_url=PHOTO_URL,
        about=tuple(ABOUT),
        interests=tuple(INTERESTS),
        highlights=tuple(HIGHLIGHTS),
    )
