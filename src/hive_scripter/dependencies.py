import re
from typing import Dict, List, Set, Tuple

from toposort import toposort, CircularDependencyError

from hive_scripter.common import log
from hive_scripter.ddl_objects import Statement, StatementKind

OBJECT_REFERENCE = re.compile(r"\b(?:FROM|JOIN)\s+`?(?:(\w+)`?\.`?)?(\w+)`?", re.IGNORECASE)


def referenced_objects(ddl: str, db_name: str, known: Dict[str, str]) -> Set[str]:
    """
    Names from known (keyed by lower case name) that a view body selects from
    """
    references = set()
    for match in OBJECT_REFERENCE.finditer(ddl):
        schema, name = match.group(1), match.group(2)
        if schema is not None and schema.lower() != db_name.lower():
            continue
        if name.lower() in known:
            references.add(known[name.lower()])
    return references


def order_by_dependency(db_name: str, statements: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """
    Reorders (table, ddl) pairs so each view follows the objects it reads from.
    Inside one dependency level the listing order is kept.
    """
    position = {name: i for i, (name, _) in enumerate(statements)}
    known = {name.lower(): name for name, _ in statements}
    ddl_by_name = dict(statements)

    dependencies = {name: set() for name, _ in statements}
    for name, ddl in statements:
        if Statement.parse(ddl).kind == StatementKind.CreateView:
            dependencies[name] = referenced_objects(ddl, db_name, known) - {name}

    try:
        levels = list(toposort(dependencies))
    except CircularDependencyError as e:
        log(f"Circular view dependencies in {db_name}, keeping listing order: {e}")
        return statements

    ordered = []
    for level in levels:
        ordered.extend(sorted(level, key=position.get))

    return [(name, ddl_by_name[name]) for name in ordered]
