import re
from enum import Enum
from typing import List

from hive_scripter.ddl_objects import Statement, StatementKind

COLUMN_TRIGGER = re.compile(r"CREATE (EXTERNAL )?TABLE|PARTITIONED BY")
COLUMN_NAME = re.compile(r"^([ \t]+)(?!(?:CONSTRAINT|PRIMARY KEY|FOREIGN KEY)\b)(\w+)(?=[\s,)]|$)")


def split_statements(ddl: str) -> List[str]:
    """
    Statements span many physical lines, so newlines go first and then the text is cut on ';'.
    Pieces can be empty (trailing separator), callers skip those.
    """
    return ddl.replace("\n", "").split(";")


class LineState(Enum):
    Passing = 1
    Clause = 2
    Columns = 3


class DdlLine(object):
    text: str
    indented: bool

    def __init__(self, text: str):
        self.text = text
        self.indented = text[:1] in (" ", "\t")

    @property
    def terminated(self) -> bool:
        return self.text.rstrip().endswith(";")

    def __str__(self):
        return self.text


class LineScanner(object):
    """
    Walks the physical lines of a DDL blob one at a time. Subclasses decide in step() what to emit
    for the current line and which state the cursor moves to.

    Lines of a statement opening with an unrecognised CREATE header are copied unchanged up to and
    including the line that terminates it.
    """
    lines: List[DdlLine]
    output: List[str]
    index: int
    state: LineState
    skipping: bool

    def __init__(self, text: str):
        self.lines = [DdlLine(line) for line in text.split("\n")]
        self.output = []
        self.index = 0
        self.state = LineState.Passing
        self.skipping = False

    def scan(self) -> str:
        while self.index < len(self.lines):
            line = self.lines[self.index]
            self.track_statement(line)
            if self.skipping:
                self.output.append(line.text)
                self.skipping = not line.terminated
            else:
                self.step(line)
            self.index += 1

        return "\n".join(self.output)

    def track_statement(self, line: DdlLine):
        statement = Statement.parse(line.text)
        if statement.kind != StatementKind.Other:
            self.skipping = False
        elif statement.unrecognised_create:
            self.skipping = True
            self.state = LineState.Passing

    def step(self, line: DdlLine):
        self.output.append(line.text)


class ClauseSuppressor(LineScanner):
    """
    clause ::= <start line matching pattern> [<line starting with space or tab> ...]
    """
    pattern: re.Pattern

    def __init__(self, pattern: str | re.Pattern, text: str):
        super().__init__(text)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def step(self, line: DdlLine):
        if self.pattern.match(line.text):
            self.state = LineState.Clause
        elif self.state == LineState.Clause and not line.indented:
            self.state = LineState.Passing

        if self.state == LineState.Passing:
            self.output.append(line.text)
        elif line.terminated:
            # the statement ends inside the dropped clause, keep its separator
            self.output.append(";")
            self.state = LineState.Passing


class ColumnEscaper(LineScanner):
    """
    columns ::= <CREATE [EXTERNAL] TABLE | PARTITIONED BY line> [<indented column line> ...]
    """

    def step(self, line: DdlLine):
        if COLUMN_TRIGGER.search(line.text):
            self.state = LineState.Columns
            self.output.append(line.text)
        elif self.state == LineState.Columns and line.indented:
            self.output.append(COLUMN_NAME.sub(r"\1`\2`", line.text, count=1))
        else:
            self.state = LineState.Passing
            self.output.append(line.text)


def suppress_clause(pattern: str | re.Pattern, text: str) -> str:
    return ClauseSuppressor(pattern, text).scan()


def escape_columns(text: str) -> str:
    return ColumnEscaper(text).scan()
