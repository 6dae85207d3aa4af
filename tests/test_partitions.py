import unittest

from hive_scripter.ddl_objects import Partition, Statement, StatementKind
from hive_scripter.options import DumpOptions
from hive_scripter.partitions import partitioned_tables, partition_statements, enrich_partitions
from tests.common import SALES_DDL, EVENTS_DDL, TOP_SALES_DDL


class TestPartition(unittest.TestCase):

    def test_quotes_value_only(self):
        for key, value in [("ds", "2020-01-01"), ("hr", "00"), ("country", "US"), ("k", "")]:
            self.assertEqual(f"{key}='{value}'", str(Partition.parse(f"{key}={value}")))

    def test_slash_separated(self):
        partition = Partition.parse("ds=2020-01-01/hr=00")
        self.assertEqual([("ds", "2020-01-01"), ("hr", "00")], partition.values)
        self.assertEqual("ds='2020-01-01', hr='00'", str(partition))

    def test_whitespace_separated(self):
        self.assertEqual("ds='2020-01-01', hr='00'", str(Partition.parse("  ds=2020-01-01\thr=00 ")))

    def test_value_with_equals(self):
        self.assertEqual("expr='a=b'", str(Partition.parse("expr=a=b")))

    def test_unescaped_space_in_value(self):
        partition = Partition.parse("ds=2020-01-01 00%3A00%3A00/hr=1")
        self.assertEqual([("ds", "2020-01-01 00%3A00%3A00"), ("hr", "1")], partition.values)
        self.assertEqual(["ALTER TABLE t ADD PARTITION (ds='2020-01-01 00%3A00%3A00', hr='1');"],
                         partition_statements("t", ["ds=2020-01-01 00%3A00%3A00/hr=1"]))

    def test_separator_kept_in_value(self):
        self.assertEqual("name='a  b\tc'", str(Partition.parse("name=a  b\tc")))

    def test_noise(self):
        self.assertEqual([], Partition.parse("OK").values)


class TestStatement(unittest.TestCase):

    def test_parse_table(self):
        statement = Statement.parse(SALES_DDL)
        self.assertEqual(StatementKind.CreateTable, statement.kind)
        self.assertEqual("`sales`", statement.name)
        self.assertFalse(statement.external)
        self.assertTrue(statement.partitioned)

    def test_parse_external(self):
        statement = Statement.parse(EVENTS_DDL)
        self.assertEqual("events", statement.name)
        self.assertTrue(statement.external)

    def test_parse_view(self):
        statement = Statement.parse(TOP_SALES_DDL)
        self.assertEqual(StatementKind.CreateView, statement.kind)
        self.assertEqual("`top_sales`", statement.name)
        self.assertFalse(statement.partitioned)

    def test_parse_other(self):
        statement = Statement.parse("DROP TABLE t")
        self.assertEqual(StatementKind.Other, statement.kind)
        self.assertIsNone(statement.name)
        self.assertFalse(statement.unrecognised_create)
        self.assertTrue(Statement.parse("CREATE TEMPORARY TABLE t(a int)").unrecognised_create)


class TestEnrichPartitions(unittest.TestCase):

    def test_partitioned_tables(self):
        ddl = "\n\n".join(["DROP TABLE `sales`;", "CREATE TABLE IF NOT EXISTS " + SALES_DDL[len("CREATE TABLE "):] + ";",
                           EVENTS_DDL + ";", TOP_SALES_DDL + ";", "CREATE TABLE plain(\n  a int);"])
        self.assertEqual(["sales", "events"], partitioned_tables(ddl))

    def test_qualified_name(self):
        self.assertEqual(["shop.sales"], partitioned_tables("CREATE TABLE `shop`.`sales`(\n  a int)\nPARTITIONED BY (\n  ds string);"))

    def test_indented_header(self):
        self.assertEqual(["t"], partitioned_tables("  CREATE TABLE t(\n  a int)\nPARTITIONED BY (\n  ds string);"))
        self.assertEqual([], partitioned_tables("CREATE TEMPORARY TABLE t(\n  a int)\nPARTITIONED BY (\n  ds string);"))

    def test_single_partition(self):
        ddl = "CREATE TABLE t(\n  `a` int)\nPARTITIONED BY (\n  `ds` string);"
        result = enrich_partitions(ddl, lambda table: ["ds=2020-01-01"], DumpOptions())
        self.assertEqual("ALTER TABLE t ADD PARTITION (ds='2020-01-01');", result)

    def test_groups(self):
        partitions = {"sales": ["ds=2020-01-01", "ds=2020-01-02"], "events": ["ds=2020-01-01/hr=00"]}
        result = enrich_partitions(SALES_DDL + ";\n" + EVENTS_DDL + ";", partitions.get, DumpOptions())
        self.assertEqual("ALTER TABLE sales ADD PARTITION (ds='2020-01-01');\n"
                         "ALTER TABLE sales ADD PARTITION (ds='2020-01-02');\n\n"
                         "ALTER TABLE events ADD PARTITION (ds='2020-01-01', hr='00');", result)

    def test_no_rows(self):
        requested = []

        def list_partitions(table):
            requested.append(table)
            return []

        self.assertEqual("", enrich_partitions(SALES_DDL + ";", list_partitions, DumpOptions()))
        self.assertEqual(["sales"], requested)

    def test_suppressed(self):
        def list_partitions(table):
            raise AssertionError("partitions listed")

        options = DumpOptions(suppress_partition_info=True)
        self.assertEqual("", enrich_partitions(SALES_DDL + ";", list_partitions, options))

    def test_statements_skip_empty_rows(self):
        self.assertEqual(["ALTER TABLE t ADD PARTITION (ds='1');"], partition_statements("t", ["", "ds=1", "OK"]))


if __name__ == '__main__':
    unittest.main()
