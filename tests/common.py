from typing import List

from hive_scripter.adaptor import Adaptor
from hive_scripter.ddl_objects import AdaptorException

SALES_DDL = """CREATE TABLE `sales`(
  `id` bigint,
  `amount` double)
PARTITIONED BY (
  `ds` string)
ROW FORMAT SERDE
  'org.apache.hadoop.hive.ql.io.orc.OrcSerde'
STORED AS INPUTFORMAT
  'org.apache.hadoop.hive.ql.io.orc.OrcInputFormat'
OUTPUTFORMAT
  'org.apache.hadoop.hive.ql.io.orc.OrcOutputFormat'
LOCATION
  'hdfs://nn/warehouse/shop.db/sales'
TBLPROPERTIES (
  'transient_lastDdlTime'='1600000000')"""

EVENTS_DDL = """CREATE EXTERNAL TABLE events(
  id int,
  payload string)
PARTITIONED BY (
  ds string,
  hr string)
ROW FORMAT DELIMITED
  FIELDS TERMINATED BY ','
LOCATION
  '/data/events'"""

TOP_SALES_DDL = "CREATE VIEW `top_sales` AS SELECT `sales`.`id` FROM `shop`.`sales` WHERE `sales`.`amount` > 100"


class StaticAdaptor(Adaptor):
    """
    In memory warehouse, keys listed in failing raise AdaptorException:
    a database name fails its table listing, (db, table) fails the ddl fetch,
    (db, table, "partitions") fails the partition listing
    """

    def __init__(self, tables: dict = None, statements: dict = None, partitions: dict = None,
                 failing: set = None):
        super().__init__("static://")
        self.tables = tables or {}
        self.statements = statements or {}
        self.partitions = partitions or {}
        self.failing = failing or set()
        self.calls = []

    def check(self, key):
        self.calls.append(key)
        if key in self.failing:
            raise AdaptorException(f"{key} failed")

    def list_databases(self) -> List[str]:
        self.check("databases")
        return list(self.tables.keys())

    def list_tables(self, db_name: str) -> List[str]:
        self.check(db_name)
        return self.tables.get(db_name, [])

    def fetch_create_statement(self, db_name: str, table: str) -> str:
        self.check((db_name, table))
        return self.statements.get((db_name, table), "")

    def list_partitions(self, db_name: str, table: str) -> List[str]:
        self.check((db_name, table, "partitions"))
        return self.partitions.get((db_name, table), [])


def shop_adaptor(**kwargs) -> StaticAdaptor:
    return StaticAdaptor(tables={"shop": ["sales", "top_sales"]},
                         statements={("shop", "sales"): SALES_DDL, ("shop", "top_sales"): TOP_SALES_DDL},
                         partitions={("shop", "sales"): ["ds=2020-01-01", "ds=2020-01-02"]},
                         **kwargs)
