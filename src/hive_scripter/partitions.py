from typing import Callable, List

from hive_scripter.ddl_objects import Statement, Partition, unquote_name
from hive_scripter.ddl_parser import split_statements
from hive_scripter.options import DumpOptions


def partitioned_tables(ddl: str) -> List[str]:
    """
    Unquoted names of the partitioned CREATE [EXTERNAL] TABLE statements in a DDL blob
    """
    tables = []
    for text in split_statements(ddl):
        statement = Statement.parse(text)
        if statement.partitioned:
            tables.append(unquote_name(statement.name))
    return tables


def partition_statements(table: str, rows: List[str]) -> List[str]:
    statements = []
    for row in rows:
        partition = Partition.parse(row)
        if partition.values:
            statements.append(f"ALTER TABLE {table} ADD PARTITION ({partition});")
    return statements


def enrich_partitions(ddl: str, list_partitions: Callable[[str], List[str]], options: DumpOptions) -> str:
    """
    One ALTER TABLE ... ADD PARTITION group per partitioned table, groups separated by a blank line.
    list_partitions gets the unquoted table name and returns the raw listing rows.
    """
    if options.suppress_partition_info:
        return ""

    groups = []
    for table in partitioned_tables(ddl):
        statements = partition_statements(table, list_partitions(table))
        if statements:
            groups.append("\n".join(statements))

    return "\n\n".join(groups)
