import logging
import os

from avldb import IndexedDatabase, Record

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEFAULT_DEMO_RECORDS = 1000


def main():
    count = int(os.environ.get("DEMO_RECORDS", DEFAULT_DEMO_RECORDS))
    if count <= 0:
        raise ValueError(f"DEMO_RECORDS must be positive, got {count}")

    db = IndexedDatabase()

    for key, value in (("a", 1), ("b", 2), ("c", 3)):
        db.insert(Record(key, value))
    logger.info(f"Keys in order: {[r.key for r in db]}")
    logger.info(f"Height after three ascending inserts: {db.get_tree_height()}")

    logger.info(f"search('b') -> {db.search('b', 2)}")
    logger.info(f"search('z') -> {db.search('z', 0)}")
    logger.info(f"Comparisons for 'c': {db.get_search_comparisons('c', 3)}")

    db.delete_record("b", 99)
    logger.info(f"After delete('b', 99): {len(db)} records")
    db.delete_record("b", 2)
    logger.info(f"After delete('b', 2): {[r.as_tuple() for r in db]}")

    db.clear_database()
    for i in range(count):
        db.insert(Record(f"key{i:06d}", i))

    height = db.get_tree_height()
    logger.info(f"Loaded {len(db)} sequential records, height {height}")

    hits = db.range_query(count // 4, count // 4 + 9)
    logger.info(f"range_query returned {len(hits)} records: {[r.value for r in hits]}")

    worst = max(db.get_search_comparisons(r.key) for r in db)
    logger.info(f"Worst-case search comparisons: {worst}")

    db.clear_database()
    logger.info(
        f"After clear: height {db.get_tree_height()}, "
        f"search('key000000') -> {db.search('key000000')}"
    )


if __name__ == "__main__":
    main()
