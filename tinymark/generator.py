"""The generator logic."""

import configparser
import os
import sys
import xml.etree.ElementTree as ET

import html5lib

from tinymark.context import render_html
from tinymark.errors import MarkdownError
from tinymark.parser import parse
from tinymark.block_node import HeadingNode


class Generator:
    """A self-contained generator with a working directory."""

    META_KEYS = ("description", "author")

    def __init__(self, workdir):
        self.workdir = workdir
        config = configparser.ConfigParser()
        config.optionxform = str  # Keep nav labels as written.
        config.read(os.path.join(workdir, "config.ini"), encoding="UTF-8")

        self.content_dir = os.path.abspath(
            os.path.join(workdir, config.get("tinymark", "content", fallback="content"))
        )
        self.output_path = os.path.abspath(
            os.path.join(workdir, config.get("tinymark", "output", fallback="public"))
        )
        self.site_lang = config.get("tinymark", "lang", fallback="en")
        self.escape_html = config.getboolean("tinymark", "escape_html", fallback=False)
        self.nav = []
        if config.has_section("nav"):
            # items() mixes in [DEFAULT] keys, which are not links.
            defaults = config.defaults()
            self.nav = [
                (label, href)
                for label, href in config.items("nav")
                if label not in defaults
            ]

    def build(self, /) -> list:
        """
        Walk the content directory and convert every markdown file.

        Returns the source paths that failed to parse.
        """

        print(
            f"Starting generation from '{self.content_dir}' into '{self.output_path}'...",
            file=sys.stderr,
        )
        os.makedirs(self.output_path, exist_ok=True)

        failed = []
        self._build_dir(self.content_dir, failed)

        print("Generation complete.", file=sys.stderr)
        if failed:
            print(f"{len(failed)} file(s) failed to convert.", file=sys.stderr)
        return failed

    def _get_output_path(self, input_path):
        return os.path.join(
            self.output_path,
            os.path.relpath(input_path, self.content_dir).removesuffix(".md") + ".html",
        )

    def _build_dir(self, path: str, failed: list) -> None:
        for item in sorted(os.listdir(path)):
            full_path = os.path.join(path, item)
            if os.path.isdir(full_path):
                if item.startswith("."):
                    continue
                self._build_dir(full_path, failed)
            elif os.path.isfile(full_path) and item.endswith(".md"):
                if not self._build_one(full_path):
                    failed.append(full_path)

    def _build_one(self, source_path) -> bool:
        """
        Convert a single file from markdown to html and write the output to
        disk.
        """

        with open(source_path, "rb") as f:
            source = f.read()

        try:
            result = parse(source)
        except MarkdownError as e:
            print(f"Error: {source_path}: {e}", file=sys.stderr)
            return False

        body = render_html(result.root, escape=self.escape_html)
        title = self._find_title(result, source_path)
        tree = self.apply_layout(title, body, result.metadata)

        dest_path = self._get_output_path(source_path)
        os.makedirs(os.path.dirname(dest_path), exist_ok=True)
        with open(dest_path, "w", encoding="UTF-8") as f:
            f.write(self.serialize(tree))

        print(
            f"[GEN] {os.path.relpath(source_path, self.content_dir)} -> "
            f"{os.path.relpath(dest_path, self.output_path)}",
            file=sys.stderr,
        )
        return True

    @staticmethod
    def _find_title(result, source_path) -> str:
        title = result.metadata.get("title")
        if title:
            return title

        for node in result.root.children:
            if isinstance(node, HeadingNode) and node.level == 1:
                return node.get_text()

        return os.path.splitext(os.path.basename(source_path))[0]

    def _create_empty_document(self) -> ET.ElementTree:
        """Create an empty page to insert generated content into."""
        return ET.ElementTree(
            html5lib.parse(
                """
                <!DOCTYPE html>
                <html>
                    <head>
                        <meta name="viewport" content="width=device-width, initial-scale=1.0" />
                    </head>
                    <body><main></main></body>
                </html>
                """,
                treebuilder="etree",
                namespaceHTMLElements=False,
            )
        )

    def apply_layout(self, title: str, body: str, metadata: dict) -> ET.ElementTree:
        """Wrap a rendered body fragment into a full page."""

        document = self._create_empty_document()
        document.getroot().set("lang", metadata.get("lang", self.site_lang))

        head = document.find("head")
        title_element = ET.SubElement(head, "title")
        title_element.text = title

        for name in self.META_KEYS:
            if name in metadata:
                meta_element = ET.SubElement(head, "meta")
                meta_element.set("name", name)
                meta_element.set("content", metadata[name])

        body_element = document.find("body")
        main = body_element.find("main")

        if self.nav:
            nav = ET.Element("div")
            nav.set("class", "nav")
            for label, href in self.nav:
                anchor = ET.SubElement(nav, "a")
                anchor.set("href", href)
                anchor.text = label
            body_element.insert(0, nav)

        fragment = html5lib.parseFragment(
            body,
            treebuilder="etree",
            namespaceHTMLElements=False,
            container="main",
        )
        main.text = fragment.text
        for element in list(fragment):
            main.append(element)

        return document

    @staticmethod
    def serialize(document: ET.ElementTree) -> str:
        result = b"<!DOCTYPE html>" + html5lib.serialize(
            document.getroot(),
            "etree",
            encoding="UTF-8",
            quote_attr_values="spec",
            omit_optional_tags=False,  # No, they are not optional for **serializers**
            inject_meta_charset=True,
        )
        return result.decode("UTF-8")
