from typing import List

from hive_scripter.ddl_objects import Database


class Adaptor(object):
    """
    Everything the dumper needs from the warehouse. Concrete adaptors talk to a query tool,
    failures surface as AdaptorException.
    """

    def __init__(self, connection: str):
        self.connection = connection

    def list_databases(self) -> List[str]:
        ...

    def list_tables(self, db_name: str) -> List[str]:
        ...

    def fetch_create_statement(self, db_name: str, table: str) -> str:
        ...

    def list_partitions(self, db_name: str, table: str) -> List[str]:
        ...

    def import_database(self, db_name: str) -> Database:
        return Database(db_name, self.list_tables(db_name))

    @staticmethod
    def qualify(db_name: str, table: str) -> str:
        if "." in table:
            return table
        return f"{db_name}.{table}"
