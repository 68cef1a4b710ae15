import base64
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app.config import Settings
from backend.app.main import app, get_settings, get_store
from backend.app.repo.github import GitHubRepo

SECRET = "s3cret"


def encode_doc(doc) -> str:
    return base64.b64encode(json.dumps(doc).encode("utf-8")).decode("ascii")


class FakeGitHub:
    """Minimal stand-in for the Contents API, driven through httpx.MockTransport."""

    def __init__(self, content=None, sha="T1", get_status=200, put_status=200, raw_content=None):
        self.content = raw_content if raw_content is not None else (encode_doc(content) if content is not None else None)
        self.sha = sha
        self.get_status = get_status
        self.put_status = put_status
        self.requests = []

    @property
    def gets(self):
        return [r for r in self.requests if r.method == "GET"]

    @property
    def puts(self):
        return [r for r in self.requests if r.method == "PUT"]

    def put_body(self, index=-1):
        return json.loads(self.puts[index].content)

    def written_doc(self, index=-1):
        return json.loads(base64.b64decode(self.put_body(index)["content"]).decode("utf-8"))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            if self.get_status != 200:
                return httpx.Response(self.get_status, text='{"message":"Not Found"}')
            body = {"sha": self.sha, "encoding": "base64", "path": "scores.json"}
            if self.content is not None:
                body["content"] = self.content
            return httpx.Response(200, json=body)
        if request.method == "PUT":
            if self.put_status >= 300:
                return httpx.Response(self.put_status, text='{"message":"scores.json does not match"}')
            # Commit aceite: o conteúdo novo passa a ser o atual
            self.content = json.loads(request.content)["content"]
            self.sha = self.sha + "+"
            return httpx.Response(self.put_status, json={"content": {"sha": self.sha}})
        return httpx.Response(405)


@pytest.fixture()
def settings():
    return Settings(
        github_token="tok",
        github_owner="owner",
        github_repo="repo",
        admin_secret=SECRET,
    )


@pytest.fixture()
def github():
    return FakeGitHub(content={"scores": {"g1": {"home": 1, "away": 2}}})


@pytest.fixture()
def store(settings, github):
    return GitHubRepo(settings, transport=httpx.MockTransport(github))


@pytest.fixture()
def client(settings, store):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
