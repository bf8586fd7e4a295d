"""
subcl command line interface.

Searches the Subsonic library and hands the resulting stream URLs to mpd.
"""

import argparse
import logging
from typing import List, Optional

from . import __version__
from .api import SubsonicAPI
from .config import SubclConfig
from .exceptions import SubclError
from .logger import setup_logging
from .models import Entity, EntityKind, SearchCategory
from .player import MpcPlayer

logger = logging.getLogger(__name__)

CATEGORIES = [category.value for category in SearchCategory]


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="subcl",
        description="Play music from a Subsonic server through mpd",
        epilog="Example: subcl play artist 'pink floyd'",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print player commands instead of running mpc",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("play", "Replace the play queue with the matches and start playing"),
        ("queue", "Append the matches to the play queue"),
        ("search", "Print the matches"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("category", choices=CATEGORIES)
        command.add_argument("term", nargs="+")

    random_command = commands.add_parser("random", help="Queue random songs")
    random_command.add_argument("count", nargs="?", default=None)

    art_command = commands.add_parser(
        "albumart-url", help="Print the cover art URL of the current song"
    )
    art_command.add_argument("--size", type=int, default=None)

    return parser


def format_entity(entity: Entity) -> str:
    data = entity.to_dict()
    if entity.kind == EntityKind.SONG:
        return f"song\t{data.get('artist', '')} - {data.get('title', '')}"
    return f"{entity.kind.value}\t{data.get('name', '')}"


def run(args: argparse.Namespace, api: SubsonicAPI, player: MpcPlayer) -> int:
    if args.command == "albumart-url":
        print(api.album_art_url(player.current(), args.size))
        return 0

    if args.command == "random":
        songs = api.random_songs(args.count)
        for song in songs:
            player.add(song.stream_url)
        return 0

    matches: List[Entity] = api.search(" ".join(args.term), args.category)

    if args.command == "search":
        for entity in matches:
            print(format_entity(entity))
        return 0

    songs = api.expand_to_songs(matches)
    if not songs:
        logger.warning("No matching songs found")
        return 1

    if args.command == "play":
        player.clear()
    for song in songs:
        player.add(song.stream_url)
    if args.command == "play":
        player.play()

    logger.info(f"Queued {len(songs)} songs")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        config = SubclConfig.from_environment()
        with SubsonicAPI(config) as api:
            return run(args, api, MpcPlayer(dry_run=args.dry_run))
    except SubclError as e:
        logger.error(str(e))
        return 1
