#!/usr/bin/python3
#
# macinfo -- Show alternate representations of MAC addresses
#

import argparse
import logging
import os
from prompt_toolkit import PromptSession, HTML
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
import sys

from macparse.exceptions import AddressError
from macparse.parser import parse


CONFIG_PATH = os.path.expanduser("~/.config/macparse/")


logger = logging.getLogger("macinfo")


def classify(address) -> str:
    if address.is_broadcast():
        kind = "broadcast"
    elif address.is_multicast():
        kind = "multicast"
    else:
        kind = "unicast"
    return f"{kind} {'universal' if address.is_universal() else 'local'}"


FORMATS = {
    "raw": lambda a: a.raw(),
    "eui": lambda a: a.eui(),
    "hex": lambda a: a.hex(),
    "dot": lambda a: a.dot(),
    "octets": lambda a: " ".join(a.octets()),
    "bits": lambda a: " ".join(a.bits()),
    "binary": lambda a: a.binary(),
    "oui": lambda a: a.oui(),
    "nic": lambda a: a.nic(),
    "eui64": lambda a: a.eui64(),
    "ipv6": lambda a: a.ipv6_link_local(),
    "class": classify,
}


def render(address, format="summary") -> str:
    if format == "summary":
        return address.summary()
    if format == "all":
        return "\n".join(f"{name}: {formatter(address)}" for name, formatter in FORMATS.items())
    return FORMATS[format](address)


def handle_address(text, format) -> int:
    """
    Print ``text`` rendered in ``format``. Returns the exit status for it.
    """
    try:
        address = parse(text)
    except AddressError as e:
        print(e, file=sys.stderr)
        return 1

    logger.debug(f"Parsed {text!r} as {address!r}")
    print(render(address, format))
    return 0


def run_repl(format, input=None, output=None, history=None) -> int:
    if history is None:
        if not os.path.isdir(CONFIG_PATH):
            os.makedirs(CONFIG_PATH, 0o700)
        history = FileHistory(os.path.join(CONFIG_PATH, "history"))

    session = PromptSession(
        HTML("<b>mac></b> "),
        completer=WordCompleter(["all", "summary", *FORMATS]),
        history=history,
        input=input,
        output=output,
    )

    ret = 0
    while True:
        try:
            text = session.prompt()
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        text = text.strip()
        if not text:
            continue

        # A bare format name switches the output format
        if text in FORMATS or text in ("all", "summary"):
            format = text
            continue

        ret |= handle_address(text, format)

    return ret


def run(argv=None) -> int:
    parser = argparse.ArgumentParser("macinfo", description="Show alternate representations of MAC addresses")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "-f",
        "--format",
        choices=["summary", "all", *FORMATS],
        default="summary",
        help="Representation to print",
    )
    parser.add_argument("address", help="Address to show", nargs="*")
    args = parser.parse_args(argv)

    if args.debug:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s:%(name)s] %(msg)s"))
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(handler)

    if args.address:
        ret = 0
        for text in args.address:
            ret |= handle_address(text, args.format)
        return ret

    if not sys.stdin.isatty():
        ret = 0
        for line in sys.stdin.readlines():
            if line.strip():
                ret |= handle_address(line.rstrip("\n"), args.format)
        return ret

    return run_repl(args.format)


def main():
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        pass
