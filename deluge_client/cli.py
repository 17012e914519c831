"""
Command-line interface for the Deluge client.

Usage:
    deluge-client list
    deluge-client get <torrent_id>
    deluge-client add <magnet/url>
    deluge-client remove <torrent_id>
    deluge-client top <torrent_id>

Connection settings default to DELUGE_URL / DELUGE_PASSWORD from the
environment (or a .env file) and can be overridden with --url / --password.
"""

import argparse
import sys

from .client import DelugeClient
from .config import Config
from .exceptions import DelugeClientError
from .logger import configure_logging, logger


def cmd_list(client, args):
    torrents = client.get_all()
    if not torrents:
        print("No torrents")
        return
    for torrent in torrents:
        print(
            f"{torrent.id}  {torrent.progress:6.2f}%  ratio {torrent.share_ratio:.3f}  "
            f"{torrent.message:<10}  {torrent.name}"
        )


def cmd_get(client, args):
    torrent = client.get(args.torrent_id)
    if torrent is None:
        print(f"Torrent not found: {args.torrent_id}", file=sys.stderr)
        sys.exit(1)
    print(f"Name:     {torrent.name}")
    print(f"Progress: {torrent.progress:.2f}%")
    print(f"Ratio:    {torrent.share_ratio:.3f}")
    print("Files:")
    for path in torrent.files:
        print(f"  {path}")


def cmd_add(client, args):
    client.add_magnet(args.uri)
    print("Torrent added")


def cmd_remove(client, args):
    client.remove(args.torrent_id)
    print(f"Removed {args.torrent_id}")


def cmd_top(client, args):
    client.move_to_queue_top(args.torrent_id)
    print(f"Moved {args.torrent_id} to the top of the queue")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="deluge-client",
        description="Deluge Web UI client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list
  %(prog)s add magnet:?xt=urn:btih:...
  %(prog)s get <torrent_id>
  %(prog)s remove <torrent_id>
"""
    )
    parser.add_argument("--url", default=Config.DELUGE_URL, help="Deluge Web UI base URL")
    parser.add_argument("--password", default=Config.DELUGE_PASSWORD, help="Deluge Web UI password")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to the console")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all torrents").set_defaults(func=cmd_list)

    p = subparsers.add_parser("get", help="Show a torrent and its files")
    p.add_argument("torrent_id")
    p.set_defaults(func=cmd_get)

    p = subparsers.add_parser("add", help="Add a magnet or torrent link")
    p.add_argument("uri")
    p.set_defaults(func=cmd_add)

    p = subparsers.add_parser("remove", help="Remove a torrent and its data")
    p.add_argument("torrent_id")
    p.set_defaults(func=cmd_remove)

    p = subparsers.add_parser("top", help="Move a torrent to the top of the queue")
    p.add_argument("torrent_id")
    p.set_defaults(func=cmd_top)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose or Config.VERBOSE)

    try:
        client = DelugeClient(args.url, args.password, timeout=Config.DELUGE_TIMEOUT)
    except ValueError as e:
        parser.error(str(e))

    try:
        with client:
            client.connect()
            args.func(client, args)
    except DelugeClientError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
