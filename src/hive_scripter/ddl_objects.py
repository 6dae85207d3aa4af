import re
from enum import Enum
from typing import List, Tuple


class DataException(Exception):
    ...


class DdlException(DataException):
    ...


class AdaptorException(DataException):
    ...


class StatementKind(Enum):
    CreateTable = 1
    CreateView = 2
    Other = 3


CREATE_HEADER = r"^(?P<create>[ \t]*CREATE (?P<external>EXTERNAL )?(?P<kind>TABLE|VIEW) )" \
                r"(?P<if_not_exists>IF NOT EXISTS )?(?P<name>[^\s(]+)"
STATEMENT_HEADER = re.compile(CREATE_HEADER)


def unquote_name(name: str) -> str:
    return name.replace("`", "")


class Statement:
    """
    Statement - one semicolon delimited chunk of DDL text
    kind, name and external are inferred from the header, Other when it doesn't look like a create
    """
    text: str
    kind: StatementKind
    name: str
    external: bool

    def __init__(self, text: str, kind: StatementKind = StatementKind.Other, name: str = None,
                 external: bool = False):
        self.text = text
        self.kind = kind
        self.name = name
        self.external = external

    @classmethod
    def parse(cls, text: str) -> "Statement":
        match = STATEMENT_HEADER.match(text)
        if not match:
            return cls(text)

        kind = StatementKind.CreateTable if match.group("kind") == "TABLE" else StatementKind.CreateView
        return cls(text, kind, match.group("name"), match.group("external") is not None)

    @property
    def partitioned(self) -> bool:
        return self.kind == StatementKind.CreateTable and "PARTITIONED BY" in self.text

    @property
    def unrecognised_create(self) -> bool:
        return self.kind == StatementKind.Other and self.text.lstrip().upper().startswith("CREATE")

    def __str__(self):
        return f"{self.kind.name} {self.name}" if self.name else self.kind.name


class Partition:
    """
    Partition - ordered key/value pairs from one row of a partition listing
    rows look like ds=2020-01-01/hr=00, pairs may also be whitespace separated
    """
    values: List[Tuple[str, str]]

    def __init__(self, values: List[Tuple[str, str]] = None):
        self.values = values if values is not None else []

    @classmethod
    def parse(cls, row: str) -> "Partition":
        values = []
        separator = ""
        for i, token in enumerate(re.split(r"([/\s]+)", row.strip())):
            if i % 2:
                separator = token
            elif "=" in token:
                key, value = token.split("=", 1)
                values.append((key, value))
            elif token and values:
                # hive does not escape spaces, the token belongs to the previous value
                key, value = values[-1]
                values[-1] = (key, value + separator + token)
        return cls(values)

    def __str__(self):
        return ", ".join([f"{key}='{value}'" for key, value in self.values])

    def __eq__(self, other):
        return self.values == other.values

    def __hash__(self):
        return hash(tuple(self.values))


class Database:
    """
    Database - name plus the table names, in listing order
    """
    name: str
    tables: List[str]

    def __init__(self, name: str, tables: List[str] = None):
        self.name = name
        self.tables = tables if tables is not None else []

    def __str__(self):
        return self.name
