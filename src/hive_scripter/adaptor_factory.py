import re

from hive_scripter.adaptor import Adaptor
from hive_scripter.beeline_adaptor import BeelineAdaptor
from hive_scripter.ddl_objects import DataException
from hive_scripter.hive_adaptor import HiveCliAdaptor


class AdaptorFactory(object):
    @classmethod
    def get_adaptor_for_connection_string(cls, connection_string: str) -> Adaptor:
        match = re.match(r"(\w+)://", connection_string)
        if match:
            tool = match.group(1)
            if tool == "hive":
                return HiveCliAdaptor(connection_string)
            elif tool == "beeline":
                return BeelineAdaptor(connection_string)

        raise DataException(f"Unsupported connection string {connection_string}")
