"""Read blog posts from a directory of metadata-headed text files."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

TITLE_SEPARATOR = "Title: "
DESCRIPTION_SEPARATOR = "Description: "
TAGS_SEPARATOR = "Tags: "
TAGS_DELIMITER = ", "

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Post:
    """A blog post: metadata and a body."""

    title: str = ""
    description: str = ""
    tags: List[str] = field(default_factory=list)
    body: str = ""

    def sanitised_title(self) -> str:
        """Title lower-cased with spaces encoded as %20, for use in URLs."""
        return self.title.replace(" ", "%20").lower()


def _strip_line_ending(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def _read_meta_line(lines: Iterator[str], prefix: str) -> str:
    line = next(lines, "")
    return line[len(prefix):] if line.startswith(prefix) else line


def new_post(stream: Iterable[str]) -> Post:
    """Parse a post from lines of text.

    The first three lines hold the title, description and comma-separated
    tags; the fourth is a separator; everything after it is the body.
    """
    lines = (_strip_line_ending(raw) for raw in stream)
    title = _read_meta_line(lines, TITLE_SEPARATOR)
    description = _read_meta_line(lines, DESCRIPTION_SEPARATOR)
    tags = _read_meta_line(lines, TAGS_SEPARATOR).split(TAGS_DELIMITER)
    next(lines, None)
    body = "\n".join(lines)
    return Post(title=title, description=description, tags=tags, body=body)


def posts_from_directory(directory: PathLike) -> List[Post]:
    """Read every file in ``directory``, in name order, as a post.

    Errors reading the directory or any file propagate as OSError.
    """
    with os.scandir(directory) as entries:
        names = sorted(entry.name for entry in entries)
    posts = []
    for name in names:
        with open(
            os.path.join(directory, name), encoding="utf-8", newline=""
        ) as post_file:
            posts.append(new_post(post_file))
    return posts


def main(argv: Optional[List[str]] = None) -> None:
    """Print the posts found in a directory (``posts`` by default)."""
    parser = argparse.ArgumentParser(description="List blog posts.")
    parser.add_argument("directory", nargs="?", default="posts")
    args = parser.parse_args(argv)
    try:
        posts = posts_from_directory(args.directory)
    except OSError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from None
    print(posts)


if __name__ == "__main__":
    main()