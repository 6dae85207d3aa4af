import re
from typing import List

from hive_scripter.adaptor import Adaptor
from hive_scripter.ddl_objects import DataException
from hive_scripter.hive_adaptor import HiveCliAdaptor
from hive_scripter.options import Options


class BeelineAdaptor(HiveCliAdaptor):
    """ Connection string is beeline://jdbc:hive2://host:port/database """
    url: str

    def __init__(self, connection: str):
        Adaptor.__init__(self, connection)

        match = re.match(r"beeline://(jdbc:hive2://.+)$", self.connection)
        if not match:
            raise DataException("Invalid connection string")

        self.url = match.group(1)
        self.executable = "beeline"
        self.options = Options()

    def command(self, query: str) -> List[str]:
        return [self.executable, "-u", self.url, "--silent=true", "--showHeader=false",
                "--outputformat=tsv2", "-e", query]
