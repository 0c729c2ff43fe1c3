"""Operation dispatcher: runs a parsed command against the GitHub REST API.

Each dispatch makes exactly one API request and returns an OperationResult.
API failures are returned as results with is_error set, never raised.
"""

import json
import re
from dataclasses import dataclass, field

import requests
from github import Auth, Github, GithubException

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def repo_name_from_description(description):
    """Derive a repository name: lowercase, runs of other chars -> '-'."""
    return _NON_ALNUM_RE.sub("-", description.lower()).strip("-")


@dataclass(frozen=True)
class RepositoryRef:
    owner: str
    repo: str

    @property
    def path(self):
        return f"/repos/{self.owner}/{self.repo}"


def split_repo_ref(name):
    """Split 'owner/repo'. No validation; a bad ref fails at the API."""
    parts = name.split("/")
    return RepositoryRef(owner=parts[0], repo=parts[1] if len(parts) > 1 else "")


@dataclass(frozen=True)
class OperationResult:
    payload: dict = field(default_factory=dict)
    is_error: bool = False

    def to_text(self):
        if self.is_error:
            return self.payload["message"]
        return json.dumps(self.payload, indent=2)


class GitHubClient:
    """The four repository endpoints, one request each.

    Goes through PyGithub's requester so that a create can carry topics and
    an update doesn't first fetch the repository.
    """

    def __init__(self, token=None, github=None):
        if github is None:
            github = Github(auth=Auth.Token(token))
        self._requester = github.requester

    def _call(self, verb, url, body):
        _headers, data = self._requester.requestJsonAndCheck(verb, url, input=body)
        return data

    def create_repo(self, name, description, homepage, topics):
        body = {
            "name": name,
            "description": description,
            "topics": list(topics),
            "auto_init": True,
        }
        if homepage is not None:
            body["homepage"] = homepage
        return self._call("POST", "/user/repos", body)

    def update_repo(self, ref, **fields):
        return self._call("PATCH", ref.path, fields)

    def replace_topics(self, ref, names):
        return self._call("PUT", ref.path + "/topics", {"names": list(names)})


def _error_message(e):
    data = getattr(e, "data", None)
    if isinstance(data, dict) and data.get("message"):
        return data["message"]
    return str(e)


class Dispatcher:
    def __init__(self, token=None, client=None):
        if client is None:
            if not token:
                raise ValueError("A GitHub token is required")
            client = GitHubClient(token)
        self.client = client

    def dispatch(self, cmd):
        """Execute cmd. Returns an OperationResult shaped for cmd.mode."""
        try:
            payload = self._run(cmd)
        except (GithubException, requests.RequestException) as e:
            return OperationResult({"message": f"GitHub API error: {_error_message(e)}"}, is_error=True)
        return OperationResult(payload)

    def _run(self, cmd):
        if cmd.mode == "create":
            data = self.client.create_repo(
                name=repo_name_from_description(cmd.description),
                description=cmd.description,
                homepage=cmd.website,
                topics=cmd.tags,
            )
            return {
                "message": "Repository created successfully",
                "url": data.get("html_url"),
                "name": data.get("name"),
                "description": data.get("description"),
                "topics": data.get("topics"),
                "homepage": data.get("homepage"),
            }

        ref = split_repo_ref(cmd.name)

        if cmd.mode == "update-description":
            data = self.client.update_repo(ref, description=cmd.description)
            return {
                "message": "Repository description updated",
                "name": data.get("name"),
                "description": data.get("description"),
            }

        elif cmd.mode == "update-tags":
            data = self.client.replace_topics(ref, cmd.tags)
            return {
                "message": "Repository topics updated",
                "topics": data.get("names"),
            }

        elif cmd.mode == "update-website":
            data = self.client.update_repo(ref, homepage=cmd.website)
            return {
                "message": "Repository website updated",
                "name": data.get("name"),
                "homepage": data.get("homepage"),
            }

        raise ValueError(f"Unknown command mode: {cmd.mode}")
