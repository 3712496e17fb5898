from unittest.mock import Mock, patch

import pytest
import requests

from github_client import RepoFetchError, fetch_user_repos


def _raw_repo(name, stars=0, **extra):
    repo = {
        "id": hash(name) & 0xFFFF,
        "name": name,
        "description": f"{name} description",
        "html_url": f"https://github.com/owner/{name}",
        "stargazers_count": stars,
        "forks_count": 1,
        "language": "Python",
        "updated_at": "2025-03-04T10:00:00Z",
    }
    repo.update(extra)
    return repo


@patch("github_client.requests.get")
def test_fetch_user_repos_requests_one_page_sorted_by_update(mock_get):
    response = Mock()
    response.status_code = 200
    response.json.return_value = []
    mock_get.return_value = response

    fetch_user_repos("testuser")

    assert mock_get.call_count == 1
    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.github.com/users/testuser/repos"
    assert kwargs["params"] == {"per_page": 100, "sort": "updated"}
    headers = kwargs["headers"]
    assert headers["Accept"] == "application/vnd.github+json"
    assert headers["Cache-Control"] == "no-cache"
    # Public endpoint, no token
    assert "Authorization" not in headers


@patch("github_client.requests.get")
def test_fetch_user_repos_maps_summary_fields(mock_get):
    response = Mock()
    response.status_code = 200
    response.json.return_value = [
        _raw_repo("alpha", stars=3),
        _raw_repo("beta", stargazers_count=None, forks_count=None, language=None),
    ]
    mock_get.return_value = response

    results = fetch_user_repos("testuser")

    assert [repo["name"] for repo in results] == ["alpha", "beta"]
    alpha = results[0]
    assert alpha["stars"] == 3
    assert alpha["forks"] == 1
    assert alpha["url"] == "https://github.com/owner/alpha"
    assert alpha["description"] == "alpha description"
    assert alpha["updated_at"] == "2025-03-04T10:00:00Z"
    # Missing counts fall back to zero
    assert results[1]["stars"] == 0
    assert results[1]["forks"] == 0
    assert results[1]["language"] is None


@patch("github_client.requests.get")
def test_fetch_user_repos_returns_empty_list_for_non_list_payload(mock_get):
    response = Mock()
    response.status_code = 200
    response.json.return_value = {"message": "weird"}
    mock_get.return_value = response

    assert fetch_user_repos("testuser") == []


@patch("github_client.requests.get")
def test_fetch_user_repos_raises_on_error_status(mock_get):
    response = Mock()
    response.status_code = 404
    response.text = "Not Found"
    mock_get.return_value = response

    with pytest.raises(RepoFetchError, match="GitHub API error: 404"):
        fetch_user_repos("nobody")


@patch("github_client.requests.get")
def test_fetch_user_repos_wraps_network_errors(mock_get):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(RepoFetchError, match="connection refused"):
        fetch_user_repos("testuser")


@patch("github_client.requests.get")
def test_fetch_user_repos_uses_fallback_message_for_blank_errors(mock_get):
    mock_get.side_effect = requests.Timeout()

    with pytest.raises(RepoFetchError, match="Failed to fetch repos"):
        fetch_user_repos("testuser")


def test_fetch_user_repos_uses_given_session():
    session = Mock()
    session.get.return_value.status_code = 200
    session.get.return_value.json.return_value = [_raw_repo("alpha")]

    results = fetch_user_repos("testuser", session=session)

    assert session.get.called
    assert results[0]["name"] == "alpha"
