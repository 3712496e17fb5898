"""
Splits the fetched repositories into the featured and top grids.
"""

from typing import NamedTuple

from config import FEATURED, TOP_REPO_LIMIT


class ProjectSelection(NamedTuple):
    featured: list
    top: list


def select_projects(repos, featured=FEATURED, limit=TOP_REPO_LIMIT):
    """
    Partition repositories into the featured grid and the top grid.

    Featured repos follow the order of `featured`; names missing from
    `repos` are skipped. The rest are ranked by stars, highest first, and
    cut to `limit`. Equal star counts keep their input order.
    """
    by_name = {repo.get("name"): repo for repo in repos}
    featured_repos = [by_name[name] for name in featured if name in by_name]

    pinned = set(featured)
    remaining = [repo for repo in repos if repo.get("name") not in pinned]
    # sorted() is stable, so ties stay in fetch order
    remaining = sorted(remaining, key=lambda repo: repo.get("stars") or 0, reverse=True)

    return ProjectSelection(featured=featured_repos, top=remaining[:limit])
