"""
GitHub API client for fetching a user's public repositories.
"""

import requests
from config import (
    GITHUB_API_URL,
    REPO_PAGE_SIZE,
    REPO_SORT,
    REQUEST_TIMEOUT,
    logger,
)


class RepoFetchError(Exception):
    """Raised when the repository list could not be acquired."""
    pass


def _summarize(repo):
    return {
        "id": repo.get("id"),
        "name": repo.get("name"),
        "description": repo.get("description"),
        "url": repo.get("html_url"),
        "stars": repo.get("stargazers_count") or 0,
        "forks": repo.get("forks_count") or 0,
        "language": repo.get("language"),
        "updated_at": repo.get("updated_at"),
    }


def fetch_user_repos(username, session=None):
    """
    Fetch the public repositories of a GitHub user, most recently updated first.

    A single request is made: no pagination, no retry.

    Args:
        username (str): The GitHub username.
        session (requests.Session, optional): Session to issue the request on.

    Returns:
        list: Repository summary dicts (name, description, url, stars, ...).

    Raises:
        RepoFetchError: On a transport failure or a non-200 response.
    """
    headers = {
        "Accept": "application/vnd.github+json",
        "Cache-Control": "no-cache",
    }
    params = {"per_page": REPO_PAGE_SIZE, "sort": REPO_SORT}
    url = f"{GITHUB_API_URL}/users/{username}/repos"
    http = session or requests

    try:
        logger.info(f"Fetching GitHub repos for {username}")
        response = http.get(url, params=params, headers=headers, timeout=REQUEST_TIMEOUT)
        if response.status_code != 200:
            logger.error(f"GitHub API Error: {response.status_code} - {response.text}")
            raise RepoFetchError(f"GitHub API error: {response.status_code}")
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Unexpected error fetching repos: {str(e)}")
        raise RepoFetchError(str(e) or "Failed to fetch repos") from e

    if not isinstance(data, list):
        logger.warning(f"Unexpected payload for {username}: {type(data).__name__}")
        return []

    return [_summarize(repo) for repo in data if isinstance(repo, dict)]
