"""Tests for the subcl command line entry point."""

import pytest
from pytest_mock import MockerFixture

from subcl import cli
from subcl.models import Entity, EntityKind
from tests.conftest import subsonic_xml


@pytest.fixture
def player(mocker: MockerFixture):
    return mocker.Mock()


def parse(*argv):
    return cli.create_parser().parse_args(list(argv))


class TestParser:
    """Test cases for argument parsing."""

    def test_play_joins_term(self):
        args = parse("play", "artist", "pink", "floyd")

        assert args.command == "play"
        assert args.category == "artist"
        assert args.term == ["pink", "floyd"]

    def test_rejects_unknown_category(self):
        with pytest.raises(SystemExit):
            parse("play", "genre", "rock")


class TestRun:
    """Test cases for command execution against a fake server."""

    def test_play_clears_adds_and_plays(self, api, server, player):
        server.route("search3.view", subsonic_xml(
            '<searchResult3><song id="s1" title="Echoes"/><song id="s2" title="Dogs"/></searchResult3>'
        ))

        assert cli.run(parse("play", "song", "echoes"), api, player) == 0

        calls = [call[0] for call in player.method_calls]
        assert calls == ["clear", "add", "add", "play"]
        assert player.add.call_args_list[0].args[0] == api.stream_url("s1")

    def test_queue_does_not_clear(self, api, server, player):
        server.route("search3.view", subsonic_xml(
            '<searchResult3><album id="a1" name="Meddle"/></searchResult3>'
        ))
        server.route("getAlbum.view", subsonic_xml('<album id="a1"><song id="s1"/></album>'))

        assert cli.run(parse("queue", "album", "meddle"), api, player) == 0

        assert [call[0] for call in player.method_calls] == ["add"]

    def test_no_matches(self, api, server, player):
        server.route("search3.view", subsonic_xml("<searchResult3/>"))

        assert cli.run(parse("play", "song", "nothing"), api, player) == 1
        player.clear.assert_not_called()

    def test_search_prints(self, api, server, player, capsys):
        server.route("getPlaylists.view", subsonic_xml(
            '<playlists><playlist id="p1" name="Road trip" owner="me"/></playlists>'
        ))

        assert cli.run(parse("search", "playlist", "road"), api, player) == 0

        assert "playlist\tRoad trip" in capsys.readouterr().out

    def test_albumart_url(self, api, player, capsys):
        player.current.return_value = api.stream_url("s5")

        assert cli.run(parse("albumart-url", "--size", "100"), api, player) == 0

        assert "getCoverArt.view" in capsys.readouterr().out


class TestMain:
    """Test cases for main() error handling."""

    def test_missing_configuration_exits_1(self, monkeypatch, mocker: MockerFixture):
        monkeypatch.delenv("SUBSONIC_URL", raising=False)
        mocker.patch("subcl.cli.setup_logging")

        assert cli.main(["search", "song", "x"]) == 1


def test_format_entity():
    song = Entity(EntityKind.SONG, {"id": "1", "artist": "Pink Floyd", "title": "Time"})
    album = Entity(EntityKind.ALBUM, {"id": "2", "name": "Meddle"})

    assert cli.format_entity(song) == "song\tPink Floyd - Time"
    assert cli.format_entity(album) == "album\tMeddle"
