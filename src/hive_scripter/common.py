import os.path
import shutil
import sys
from pathlib import Path
from typing import List

NOISE_PREFIXES = ("WARN", "SLF4J", "OK", "Time taken")


def log(message: str):
    print(message, file=sys.stderr, flush=True)


def create_dir(path: str, delete: bool = False):
    if not os.path.exists(path) or not delete:
        os.makedirs(path, exist_ok=True)
    else:
        shutil.rmtree(path)
        os.mkdir(path)


def get_fullname(path: str) -> str:
    p = Path(path)
    p.resolve()
    return str(p.expanduser())


def clean_listing(output: str) -> List[str]:
    """
    One entry per non blank line of a listing query, without the tool's chatter
    """
    items = []
    for line in output.splitlines():
        line = line.strip()
        if not line or line.startswith(NOISE_PREFIXES):
            continue
        items.append(line)
    return items


def terminate_statement(ddl: str) -> str:
    ddl = ddl.rstrip()
    if ddl and not ddl.endswith(";"):
        ddl += ";"
    return ddl
