"""Command-line entry point with the server and ai sub-commands."""

import argparse
import sys
import time
from datetime import datetime

from zerobase import translator
from zerobase.netinfo import get_local_host
from zerobase.strutil import current_time_str
from zerobase.textcolor import green, red
from zerobase.webconfig import WebConfig

VERSION = "0.1.0"
_EXIT_FAILURE = 255
_COMMANDS = ("server", "ai")


def _log(message):
    print(f"{datetime.now():%Y/%m/%d %H:%M:%S} {message}", file=sys.stderr)


def _welcome(name):
    return f"欢迎使用 {green(name + ' ' + VERSION)} 可以使用 {red('-h')} 查看命令"


def tip():
    """Print the welcome banner and return its text."""
    text = "\n".join(
        [
            _welcome("zerobase"),
            "也可以参考 https://doc.example.com/guide 的相关内容",
        ]
    )
    print(text)
    return text


def build_parser():
    """Build the argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(prog="zerobase", description="zerobase")
    commands = parser.add_subparsers(dest="command")

    server = commands.add_parser(
        "server",
        help="Start API server",
        description="Start API server, e.g. zerobase server -c config/settings.yml",
    )
    server.add_argument(
        "-c",
        "--config",
        default="config/settings.yml",
        help="Start server with provided configuration file",
    )
    server.add_argument(
        "-a",
        "--api",
        action="store_true",
        help="Start server with check api data",
    )

    commands.add_parser(
        "ai",
        help="start a AI app",
        description="Use when you need to create a new AI app",
    )
    return parser


def _server_tip():
    text = f"{_welcome('zerobase')} \n"
    print(text)
    return text


def _run_server(args):
    _log("starting api server...")
    port = WebConfig().port
    local_host = get_local_host()
    _server_tip()
    print(green("Server run at:"))
    print(f"-  Local:   http://localhost:{port}/ ", end="\r\n")
    print(f"-  Network: http://{local_host}:{port}/ ", end="\r\n")
    print(green("Swagger run at:"))
    print(f"-  Local:   http://localhost:{port}/swagger/admin/index.html ", end="\r\n")
    print(f"-  Network: http://{local_host}:{port}/swagger/admin/index.html ", end="\r\n")
    print(f"{current_time_str()} Enter Control + C Shutdown Server ", end="\r\n")
    sys.stdout.flush()
    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass
    _log("Server exiting")
    return 0


def _run_ai():
    print("ai command...start")
    try:
        translator.main([])
    finally:
        print("ai command...end")
    return 0


def main(argv=None):
    """Run the command line; return the process exit status."""
    args_list = sys.argv[1:] if argv is None else list(argv)
    if not args_list:
        tip()
        print(f"Error: {red('requires at least one arg')}", file=sys.stderr)
        return _EXIT_FAILURE
    if args_list[0] not in _COMMANDS and not args_list[0].startswith("-"):
        tip()
        return 0
    args = build_parser().parse_args(args_list)
    if args.command == "server":
        return _run_server(args)
    if args.command == "ai":
        return _run_ai()
    tip()
    return 0