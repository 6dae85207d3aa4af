import re
import subprocess
from typing import List

from hive_scripter.adaptor import Adaptor
from hive_scripter.common import clean_listing
from hive_scripter.ddl_objects import AdaptorException, DataException
from hive_scripter.options import Options


class HiveCliAdaptor(Adaptor):
    """ Connection string is hive://[executable][?database=name;silent=False] """
    executable: str
    options: Options

    def __init__(self, connection: str):
        super().__init__(connection)

        match = re.match(r"hive://([^?]*)(\?.*)?$", self.connection)
        if not match:
            raise DataException("Invalid connection string")

        self.executable = match.group(1) or "hive"
        self.options = Options(match.group(2) or "")

    def command(self, query: str) -> List[str]:
        command = [self.executable]
        if self.options["silent", "True"].lower() != "false":
            command.append("-S")
        if self.options["database"]:
            command.extend(["--database", self.options["database"]])
        command.extend(["-e", query])
        return command

    def run_query(self, query: str) -> str:
        command = self.command(query)
        try:
            result = subprocess.run(command, check=True, capture_output=True, encoding="utf-8",
                                    errors="replace")
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip().splitlines()
            message = f"{query} failed with exit code {e.returncode}"
            if detail:
                message += f": {detail[-1]}"
            raise AdaptorException(message) from e
        except OSError as e:
            raise AdaptorException(f"Unable to run {command[0]}: {e}") from e

        return result.stdout

    def list_databases(self) -> List[str]:
        return clean_listing(self.run_query("show databases;"))

    def list_tables(self, db_name: str) -> List[str]:
        return clean_listing(self.run_query(f"show tables in {db_name};"))

    def fetch_create_statement(self, db_name: str, table: str) -> str:
        return self.run_query(f"show create table {self.qualify(db_name, table)};").rstrip("\n")

    def list_partitions(self, db_name: str, table: str) -> List[str]:
        return clean_listing(self.run_query(f"show partitions {self.qualify(db_name, table)};"))
