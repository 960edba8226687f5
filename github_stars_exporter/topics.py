"""Repository topic lookup using PyGithub."""

import sys

from github import Auth, Github, GithubException

from .settings import get_settings


def _log(msg: str):
    sys.stderr.write(f"[topics] {msg}\n")
    sys.stderr.flush()


class TopicsClient:
    """Fetch topic names for repositories, remembering each answer.

    Auth uses GITHUB_TOKEN when set; anonymous access works with a lower
    rate limit.
    """

    def __init__(self, token: str | None = None):
        self._token = token
        self._github: Github | None = None
        self._topics: dict[str, list[str]] = {}

    @property
    def github(self) -> Github:
        """Lazy-initialize the GitHub client."""
        if self._github is None:
            settings = get_settings()
            token = self._token or settings.github_token
            base_url = settings.github_api_base.rstrip("/")
            if token:
                self._github = Github(auth=Auth.Token(token), base_url=base_url)
            else:
                self._github = Github(base_url=base_url)
        return self._github

    def get_topics(self, full_name: str) -> list[str]:
        """Topic names for ``owner/repo``; an empty list if GitHub can't answer."""
        if full_name in self._topics:
            return self._topics[full_name]

        try:
            topics = self.github.get_repo(full_name).get_topics()
        except GithubException as e:
            _log(f"Could not fetch topics for {full_name}: {e.status}")
            topics = []

        self._topics[full_name] = topics
        return topics
