import os.path
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from hive_scripter.adaptor import Adaptor
from hive_scripter.common import log, create_dir, terminate_statement
from hive_scripter.ddl_objects import AdaptorException, Database
from hive_scripter.dependencies import order_by_dependency
from hive_scripter.options import DumpOptions
from hive_scripter.partitions import enrich_partitions
from hive_scripter.rewriter import transform


class Dumper(object):
    """
    Produces a replayable script per database: use <db>; then the rewritten DDL of every table
    in listing order, then the ALTER TABLE ... ADD PARTITION statements.

    Failed collaborator calls never abort a dump, they are logged and count as empty.
    """
    adaptor: Adaptor
    options: DumpOptions
    workers: int
    quiet: bool

    def __init__(self, adaptor: Adaptor, options: DumpOptions = None, workers: int = 1, quiet: bool = False):
        self.adaptor = adaptor
        self.options = options if options is not None else DumpOptions()
        self.workers = max(1, workers)
        self.quiet = quiet

    def log(self, message: str):
        if not self.quiet:
            log(message)

    def get_database(self, db_name: str) -> Database:
        try:
            return self.adaptor.import_database(db_name)
        except AdaptorException as e:
            self.log(f"Unable to list tables of {db_name}: {e}")
            return Database(db_name)

    def fetch_statement(self, db_name: str, table: str) -> str:
        self.log(f"{db_name}.{table}")
        try:
            return terminate_statement(self.adaptor.fetch_create_statement(db_name, table))
        except AdaptorException as e:
            self.log(f"Unable to fetch ddl of {db_name}.{table}: {e}")
            return ""

    def fetch_partitions(self, db_name: str, table: str) -> List[str]:
        try:
            return self.adaptor.list_partitions(db_name, table)
        except AdaptorException as e:
            self.log(f"Unable to list partitions of {db_name}.{table}: {e}")
            return []

    def fetch_statements(self, database: Database) -> List[Tuple[str, str]]:
        if self.workers > 1 and len(database.tables) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                statements = list(executor.map(lambda table: self.fetch_statement(database.name, table),
                                               database.tables))
        else:
            statements = [self.fetch_statement(database.name, table) for table in database.tables]

        return list(zip(database.tables, statements))

    def dump_database(self, db_name: str) -> str:
        self.log(f"Processing tables of {db_name}...")
        database = self.get_database(db_name)

        statements = self.fetch_statements(database)
        if self.options.order_by_dependency:
            statements = order_by_dependency(db_name, statements)

        ddl = "\n\n".join([statement for _, statement in statements if statement])
        ddl = transform(ddl, self.options)

        if self.options.suppress_partition_info:
            self.log("Skipping partitions...")
        else:
            self.log(f"Processing partitions of {db_name}...")
            partitions = enrich_partitions(ddl, lambda table: self.fetch_partitions(db_name, table), self.options)
            if partitions:
                ddl += "\n\n" + partitions

        return f"use {db_name};\n\n{ddl}\n"

    def get_database_names(self, names: List[str] = None) -> List[str]:
        if names:
            return names

        try:
            return self.adaptor.list_databases()
        except AdaptorException as e:
            self.log(f"Unable to list databases: {e}")
            return []

    def dump_databases(self, names: List[str] = None) -> str:
        return "\n".join([self.dump_database(name) for name in self.get_database_names(names)])

    def write_databases(self, path: str, names: List[str] = None, clean: bool = False) -> List[str]:
        create_dir(path, delete=clean)

        files = []
        for name in self.get_database_names(names):
            filename = os.path.join(path, f"{name}.sql")
            with open(filename, "w", 1024, encoding="utf8") as f:
                f.write(self.dump_database(name))
                f.flush()
            self.log(f"Wrote {filename}")
            files.append(filename)

        return files
