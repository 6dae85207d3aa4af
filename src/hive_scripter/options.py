import re
from typing import List

TRUE_VALUES = ("true", "1", "yes")


class Options(object):
    options: dict[str, str]

    def __init__(self, options: str = ""):
        options_match = re.findall(r"(\w+)=([^;&]*)", options)
        self.options = {}
        for option_match in options_match:
            self.options[option_match[0]] = option_match[1].strip()

    def __getitem__(self, key: str | tuple):
        default = None
        index = ""
        if issubclass(type(key), tuple):
            default = key[1]
            index = key[0]
        else:
            index = key

        if index not in self.options.keys():
            return default
        return self.options[index]

    def __setitem__(self, key: str, value: str):
        self.options[key] = value

    def __contains__(self, key: str):
        return key in self.options

    def flag(self, key: str) -> bool:
        return str(self[key, ""]).lower() in TRUE_VALUES


class DumpOptions(object):
    """
    Immutable dump configuration, resolved once per run and passed to every stage
    """
    __slots__ = ("if_not_exists", "drop_table", "suppress_location", "suppress_partition_info",
                 "suppress_tblproperties", "suppress_stored_as", "suppress_row_format", "strict",
                 "order_by_dependency")

    def __init__(self, if_not_exists: bool = False, drop_table: bool = False, suppress_location: bool = False,
                 suppress_partition_info: bool = False, suppress_tblproperties: bool = False,
                 suppress_stored_as: bool = False, suppress_row_format: bool = False, strict: bool = False,
                 order_by_dependency: bool = False):
        values = dict(if_not_exists=if_not_exists, drop_table=drop_table, suppress_location=suppress_location,
                      suppress_partition_info=suppress_partition_info,
                      suppress_tblproperties=suppress_tblproperties, suppress_stored_as=suppress_stored_as,
                      suppress_row_format=suppress_row_format, strict=strict,
                      order_by_dependency=order_by_dependency)
        for name, value in values.items():
            object.__setattr__(self, name, bool(value))

    @classmethod
    def from_options(cls, options: Options, **overrides) -> "DumpOptions":
        """
        Build from a key=value;key=value Options bag, keyword overrides are OR-ed in
        """
        values = {name: options.flag(name) or bool(overrides.get(name, False)) for name in cls.__slots__}
        return cls(**values)

    def __setattr__(self, key, value):
        raise AttributeError(f"DumpOptions is immutable, cannot set {key}")

    def __delattr__(self, key):
        raise AttributeError(f"DumpOptions is immutable, cannot delete {key}")

    def __eq__(self, other):
        return isinstance(other, DumpOptions) and all(
            getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self):
        enabled = [name for name in self.__slots__ if getattr(self, name)]
        return f"DumpOptions({', '.join(enabled)})"

    def suppressed_clauses(self) -> List[str]:
        clauses = []
        if self.suppress_location:
            clauses.append("LOCATION")
        if self.suppress_tblproperties:
            clauses.append("TBLPROPERTIES")
        if self.suppress_stored_as:
            clauses.extend(["STORED AS", "INPUTFORMAT", "OUTPUTFORMAT"])
        if self.suppress_row_format:
            clauses.extend(["ROW FORMAT", "WITH SERDEPROPERTIES"])
        return clauses
