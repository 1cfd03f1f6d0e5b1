from dataclasses import dataclass

from .table import StringMap


COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")


@dataclass(frozen=True)
class LoadOk:
    count: int


@dataclass(frozen=True)
class LoadError:
    line: int
    message: str


LoadResult = LoadOk | LoadError


def load(m: StringMap, source: str) -> LoadResult:
    """Insert every ``key = value`` (or ``key: value``) line of source into m.

    Blank lines and lines starting with ``#`` or ``!`` are skipped. Later lines
    override earlier ones for the same key. Loading stops at the first bad line,
    whatever came before it stays in the map.
    """
    count = 0
    for line_no, line in enumerate(source.split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        at = split_point(line)
        if at < 0:
            return LoadError(line_no, f"Expect '=' or ':' after key in '{line}'.")

        key = line[:at].strip()
        if not key:
            return LoadError(line_no, "Expect key before separator.")

        m.insert(key, line[at + 1 :].strip())
        count += 1

    return LoadOk(count)


def load_file(m: StringMap, filepath: str) -> LoadResult:
    with open(filepath, encoding="utf-8-sig") as fp:
        return load(m, fp.read())


def split_point(line: str) -> int:
    found = [i for i in (line.find(sep) for sep in SEPARATORS) if i >= 0]
    return min(found) if found else -1
