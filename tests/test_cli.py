import httpx
from click.testing import CliRunner

from darktimer import cli
from darktimer.client import ApiError

TOP = {
    "name": "Ada",
    "firstPerfectAttempt": 3,
    "message": "Catch me",
}


class FakeClient:
    instances = []

    def __init__(self, base_url):
        self.base_url = base_url
        self.submitted = []
        self.messages = []
        FakeClient.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def leaderboard(self, limit=None):
        return {"players": [TOP, {**TOP, "name": "Bob", "firstPerfectAttempt": 8}], "topPlayer": TOP}

    def submit_attempt(self, submission):
        self.submitted.append(submission)
        return {"isPerfect": True, "rank": 1, "topPlayer": TOP, "isNewRecord": True}

    def update_message(self, name, message):
        self.messages.append((name, message))
        if "nope" in message:
            raise ApiError(400, "Message contains inappropriate content")
        return {"success": True}


def test_leaderboard_command(monkeypatch):
    monkeypatch.setattr(cli, "DarkTimerClient", FakeClient)

    result = CliRunner().invoke(cli.main, ["leaderboard", "--limit", "2"])

    assert result.exit_code == 0
    assert 'Ada did it in 3 attempts - "Catch me"' in result.output
    assert "#2" in result.output and "Bob" in result.output


def test_play_submits_and_sends_message(monkeypatch):
    FakeClient.instances.clear()
    monkeypatch.setattr(cli, "DarkTimerClient", FakeClient)

    # start, stop, record message, decline retry
    result = CliRunner().invoke(
        cli.main, ["play", "--name", "Ada"], input="\n\nToo easy\nn\n"
    )

    assert result.exit_code == 0, result.output
    fake = FakeClient.instances[-1]
    assert len(fake.submitted) == 1
    assert fake.submitted[0].attempts == 1
    assert fake.messages == [("Ada", "Too easy")]
    assert "Perfect 10! Rank: #1" in result.output


def test_play_rejects_long_name(monkeypatch):
    monkeypatch.setattr(cli, "DarkTimerClient", FakeClient)

    result = CliRunner().invoke(cli.main, ["play", "--name", "x" * 31])

    assert result.exit_code != 0


class OfflineMessageClient(FakeClient):
    def update_message(self, name, message):
        raise httpx.ConnectError("connection refused")


def test_play_survives_network_error_on_message(monkeypatch):
    monkeypatch.setattr(cli, "DarkTimerClient", OfflineMessageClient)

    result = CliRunner().invoke(
        cli.main, ["play", "--name", "Ada"], input="\n\nToo easy\nn\n"
    )

    assert result.exit_code == 0, result.output
    assert result.exception is None
    assert "Message not saved" in result.output
    assert "Attempts: 1" in result.output


class OfflineClient(FakeClient):
    def leaderboard(self, limit=None):
        raise httpx.ConnectError("connection refused")


def test_leaderboard_command_reports_network_error(monkeypatch):
    monkeypatch.setattr(cli, "DarkTimerClient", OfflineClient)

    result = CliRunner().invoke(cli.main, ["leaderboard"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, httpx.HTTPError)
    assert "Leaderboard unavailable" in result.output
