"""A tiny markdown to HTML converter and site generator"""

import argparse
import os
import sys

from tinymark.context import render_html
from tinymark.dump import FORMATS, dumps
from tinymark.errors import MarkdownError
from tinymark.generator import Generator
from tinymark.parser import parse


def build_arg_parser():
    """Define CLI options."""

    parser = argparse.ArgumentParser(prog="tinymark")
    parser.add_argument("-C", "--workdir", default=".", dest="workdir")

    subparsers = parser.add_subparsers(title="Actions", required=True)

    build_parser = subparsers.add_parser("build", help="Update the website.")
    build_parser.set_defaults(action="build")

    dump_parser = subparsers.add_parser(
        "dump", help="Print the document tree and metadata of a file."
    )
    dump_parser.add_argument("file")
    dump_parser.add_argument("--format", choices=FORMATS, default="json", dest="fmt")
    dump_parser.set_defaults(action="dump")

    html_parser = subparsers.add_parser("html", help="Print a file rendered as HTML.")
    html_parser.add_argument("file")
    html_parser.add_argument("--escape", action="store_true")
    html_parser.set_defaults(action="html")

    return parser


def _read_and_parse(path):
    with open(path, "rb") as f:
        return parse(f.read())


def main(argv=None):
    """Entrypoint"""

    args = build_arg_parser().parse_args(sys.argv[1:] if argv is None else argv)

    try:
        match args.action:
            case "build":
                generator = Generator(os.path.abspath(args.workdir))
                if generator.build():
                    return 1
            case "dump":
                result = _read_and_parse(args.file)
                print(dumps(result.root.children, args.fmt))
                for key, value in result.metadata.items():
                    print(f"{key}: {value}")
            case "html":
                result = _read_and_parse(args.file)
                print(render_html(result.root, escape=args.escape))
    except MarkdownError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
