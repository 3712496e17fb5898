"""
Page view state and the one-shot, cancellable repository fetch that fills it.
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional

from config import FEATURED, GITHUB_USERNAME, TOP_REPO_LIMIT, logger
from github_client import RepoFetchError, fetch_user_repos
from projects import ProjectSelection, select_projects


@dataclass
class PortfolioState:
    repos: List[dict] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None


class ProjectsLoader:
    """
    Owns the page state and the single fetch that writes it.

    Only the completion path of `load()` writes to `state`. After
    `teardown()` a late response is dropped instead of applied.
    """

    def __init__(self, username=GITHUB_USERNAME, featured=FEATURED, limit=TOP_REPO_LIMIT):
        self.username = username
        self.featured = list(featured)
        self.limit = limit
        self.state = PortfolioState()
        self._cancelled = threading.Event()
        self._selection = None
        self._selection_source = None

    @property
    def cancelled(self):
        return self._cancelled.is_set()

    def teardown(self):
        """Stop any pending load from touching the state."""
        self._cancelled.set()

    def load(self):
        """Fetch the repository list once and record the outcome."""
        if self.cancelled:
            return self.state
        self.state.loading = True
        self.state.error = None
        try:
            repos = fetch_user_repos(self.username)
            if not self.cancelled:
                self.state.repos = repos
                logger.info(f"Loaded {len(repos)} repositories for {self.username}")
        except RepoFetchError as e:
            if not self.cancelled:
                self.state.repos = []
                self.state.error = str(e)
        finally:
            if not self.cancelled:
                self.state.loading = False
            else:
                logger.info(f"Discarded repository load for {self.username} after teardown")
        return self.state

    def start(self):
        """Run `load()` in the background and return the worker thread."""
        worker = threading.Thread(target=self.load, name=f"load-{self.username}", daemon=True)
        worker.start()
        return worker

    @property
    def selection(self) -> ProjectSelection:
        """Featured and top grids, recomputed only when the repo list changes."""
        repos = self.state.repos
        if self._selection is None or self._selection_source is not repos:
            self._selection = select_projects(repos, self.featured, self.limit)
            self._selection_source = repos
        return self._selection
