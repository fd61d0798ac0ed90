"""Regex locating the end of a game's move section."""

# pylint: disable=invalid-name

import re

# A movetext line closed by a result token and followed by at least one blank
# line. The end of the match is where the next record begins, with or without
# a header block.
GAME_END_RE: re.Pattern[str] = re.compile(
    r"(?m)^(?![ \t]*\[).*(?:^|\s)(?:1-0|0-1|1/2-1/2|\*)[ \t]*\r?\n(?:[ \t]*\r?\n)+"
)
