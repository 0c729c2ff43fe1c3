import pytest

from repotalk.commands import router


class FakeRequester:
    """Stands in for PyGithub's Requester; records every request."""

    def __init__(self, data=None, error=None):
        self.data = {} if data is None else data
        self.error = error
        self.calls = []

    def requestJsonAndCheck(self, verb, url, parameters=None, headers=None, input=None):
        self.calls.append((verb, url, input))
        if self.error is not None:
            raise self.error
        return {}, self.data


class FakeGithub:
    def __init__(self, requester):
        self.requester = requester


@pytest.fixture(autouse=True)
def request_log(tmp_path, monkeypatch):
    path = tmp_path / "repotalk.log"
    monkeypatch.setattr(router, "_LOG_PATH", str(path))
    return path
