"""Unit tests for MpcPlayer. subprocess.run is mocked throughout."""

import subprocess

import pytest
from pytest_mock import MockerFixture

from subcl.exceptions import PlayerError
from subcl.player import MpcPlayer


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def run(mocker: MockerFixture):
    return mocker.patch("subcl.player.subprocess.run", return_value=completed())


class TestMpcPlayer:
    """Test suite for the mpc wrapper."""

    def test_add_passes_url_as_single_argument(self, run):
        url = "https://u:p@music.example.com/rest/stream.view?id=1&v=1.9.0&c=subcl"

        MpcPlayer().add(url)

        assert run.call_args.args[0] == ["mpc", "add", url]

    def test_clear_stops_then_clears(self, run):
        MpcPlayer().clear()

        assert [call.args[0] for call in run.call_args_list] == [["mpc", "stop"], ["mpc", "clear"]]

    def test_play(self, run):
        MpcPlayer().play()

        assert run.call_args.args[0] == ["mpc", "play"]

    def test_current(self, run):
        run.return_value = completed(stdout="https://host/rest/stream.view?id=5\n")

        assert MpcPlayer().current() == "https://host/rest/stream.view?id=5"
        assert run.call_args.args[0] == ["mpc", "--format", "%file%", "current"]

    def test_dry_run_runs_nothing(self, run):
        player = MpcPlayer(dry_run=True)

        player.clear()
        player.add("http://x")
        player.play()

        run.assert_not_called()

    def test_dry_run_still_reads_current(self, run):
        run.return_value = completed(stdout="https://host/rest/stream.view?id=5\n")

        assert MpcPlayer(dry_run=True).current() == "https://host/rest/stream.view?id=5"
        run.assert_called_once()

    def test_failed_command_raises(self, run):
        run.return_value = completed(returncode=1, stderr="error: Connection refused")

        with pytest.raises(PlayerError, match="Connection refused"):
            MpcPlayer().play()

    def test_missing_executable(self, run):
        run.side_effect = FileNotFoundError("mpc")

        with pytest.raises(PlayerError, match="not found"):
            MpcPlayer().play()
