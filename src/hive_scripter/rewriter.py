import re

from hive_scripter.ddl_objects import Statement, DdlException, CREATE_HEADER
from hive_scripter.ddl_parser import split_statements, suppress_clause, escape_columns
from hive_scripter.options import DumpOptions

HEADER_LINE = re.compile(CREATE_HEADER, re.MULTILINE)


def rewrite_headers(ddl: str, options: DumpOptions) -> str:
    """
    Injects DROP <kind> <name>; before, and IF NOT EXISTS into, every CREATE [EXTERNAL] TABLE|VIEW header.
    Headers without an object name are left alone.
    """
    if not options.drop_table and not options.if_not_exists:
        return ddl

    def rewrite(match: re.Match) -> str:
        create, kind, if_not_exists, name = match.group("create", "kind", "if_not_exists", "name")
        if options.if_not_exists or if_not_exists:
            header = f"{create}IF NOT EXISTS {name}"
        else:
            header = f"{create}{name}"

        if options.drop_table:
            return f"DROP {kind} {name};\n\n{header}"
        return header

    return HEADER_LINE.sub(rewrite, ddl)


def check_statements(ddl: str):
    for text in split_statements(ddl):
        statement = Statement.parse(text)
        if statement.unrecognised_create:
            raise DdlException(f"Unrecognised create statement: {text.strip()[:80]}")


def transform(ddl: str, options: DumpOptions) -> str:
    """
    Rewrite, then suppress each enabled clause, then escape columns. The order matters: suppression
    and escaping key off the final CREATE header.
    """
    if options.strict:
        check_statements(ddl)

    ddl = rewrite_headers(ddl, options)
    for clause in options.suppressed_clauses():
        ddl = suppress_clause(clause, ddl)

    return escape_columns(ddl)
