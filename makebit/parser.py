"""splits rule file text into classified lines.

A line starting with a tab is a command line. Otherwise a line containing a
colon is a rule line ``name: dep1 dep2``. Blank lines and (non tab indented) lines
starting with '#' are ignored. Anything else is malformed.
"""

import io
from collections import namedtuple

RULE = 'rule'
COMMAND = 'command'
BLANK = 'blank'
MALFORMED = 'malformed'

Line = namedtuple('Line',['lineno','kind','payload','raw'])


def classify(line):
    """returns (kind, payload). payload is (name, dependencies) for rule lines,
    the command text for command lines and the line itself otherwise."""
    line = line.rstrip('\r\n')
    if line.startswith('\t'):
        return COMMAND, line.lstrip('\t')
    stripped = line.strip()
    if not stripped or stripped.startswith('#'):
        return BLANK, line
    if ':' in line:
        name,deps = line.split(':',1)
        return RULE, (name.strip(),deps.split())
    return MALFORMED, line


def parse_lines(text):
    """yields a Line for each line of text (a string or an iterable of lines
    such as an open file)"""
    lines = io.StringIO(text) if isinstance(text,str) else text
    for lineno,raw in enumerate(lines,1):
        kind,payload = classify(raw)
        yield Line(lineno,kind,payload,raw.rstrip('\r\n'))
