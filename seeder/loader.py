# seeder/loader.py

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from tqdm import tqdm

from seeder.fixtures import load_fixture
from seeder.registry import FORMAT_COLLECTIONS, UnknownCollectionError, resolve_collection

__all__ = [
    "log",
    "format_database",
    "insert_documents",
    "load_collections",
]


# -------- logging --------
def log(msg: str, err: bool = False):
    print(msg, file=sys.stderr if err else sys.stdout, flush=True)


# -------- format --------
def format_database(db, collections: Optional[Iterable[str]] = None, workers: Optional[int] = None) -> Dict[str, int]:
    """
    delete_many({}) on every collection at once and wait for all of them.
    The first failure propagates; deletes that already ran are not undone.
    Returns {collection_name: deleted_count}.
    """
    names = list(FORMAT_COLLECTIONS if collections is None else collections)
    # resolve handles up front so worker threads only issue the deletes
    targets = [db[n] for n in names]
    deleted: Dict[str, int] = {}
    if targets:
        with ThreadPoolExecutor(max_workers=workers or len(targets)) as pool:
            futures = {pool.submit(col.delete_many, {}): col.name for col in targets}
            for fut in as_completed(futures):
                deleted[futures[fut]] = fut.result().deleted_count
    log("Cleared all collections\n")
    return deleted


# -------- insert --------
def insert_documents(collection, docs: List[dict], batch_size: int = 1000) -> int:
    """Ordered insert_many in consecutive batches; file order is kept. Errors propagate."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    batches = [docs[i:i + batch_size] for i in range(0, len(docs), batch_size)]
    inserted = 0
    for batch in tqdm(batches, desc=collection.name, unit="batch", disable=len(batches) <= 1):
        res = collection.insert_many(batch, ordered=True)
        inserted += len(res.inserted_ids)
    return inserted


def load_collections(db, names: Iterable[str], data_dir, batch_size: int = 1000) -> Dict[str, int]:
    """
    Load each named fixture into its collection, one after another.
    Unknown names are reported and skipped; anything else that goes wrong propagates.
    Returns {name: inserted_count} for the collections that were added.
    """
    added: Dict[str, int] = {}
    for name in names:
        try:
            col = resolve_collection(db, name)
        except UnknownCollectionError as e:
            log(str(e), err=True)
            continue

        docs = load_fixture(name, data_dir)
        if not docs:
            log(f"[{name}] No docs to insert, {name} collection left unchanged")
            added[name] = 0
            continue
        added[name] = insert_documents(col, docs, batch_size)
        log(f"Added {name} collection")
    return added
