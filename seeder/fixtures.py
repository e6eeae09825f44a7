# seeder/fixtures.py

from pathlib import Path
from typing import Any, Dict, List, Union

from bson import json_util


class FixtureError(ValueError):
    pass


def fixture_path(name: str, data_dir: Union[str, Path]) -> Path:
    return Path(data_dir) / f"{name}.json"


def load_fixture(name: str, data_dir: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read <data_dir>/<name>.json and return its records in file order.
    Parsed as Extended JSON: {"$oid": ...} and {"$date": ...} become ObjectId / datetime.
    Missing files and malformed JSON propagate as OSError / ValueError.
    """
    path = fixture_path(name, data_dir)
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    docs = json_util.loads(raw)
    if not isinstance(docs, list):
        raise FixtureError(f"{path}: expected a JSON array, got {type(docs).__name__}")
    return docs
