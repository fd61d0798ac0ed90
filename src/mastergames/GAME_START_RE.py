"""Regex locating the first header line of each game record."""

# pylint: disable=invalid-name

import re

# A non-header line followed by a header line: the end of the match is where
# the next record's header block begins.
GAME_START_RE: re.Pattern[str] = re.compile(r"(?m)^(?!\[).*\n(?=\[[A-Za-z0-9_]+\s+\")")
