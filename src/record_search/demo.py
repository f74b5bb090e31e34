"""
Console walkthrough of the record store

Adds a fixed sample set, then times id lookups and name prefix lookups and
prints the store statistics, a few edge cases and the full listing.
"""

import time
from typing import List, Optional, Sequence, Tuple

from .core import Record, RecordStore

SAMPLE_RECORDS: List[Tuple[str, str, float]] = [
    ("S001", "Alice Johnson", 3.85),
    ("S002", "Bob Smith", 3.92),
    ("S003", "Alice Williams", 3.67),
    ("S004", "Charlie Brown", 3.45),
    ("S005", "David Miller", 3.78),
    ("S006", "Alice Davis", 3.91),
    ("S007", "Eve Anderson", 3.56),
    ("S008", "Frank Wilson", 3.73),
    ("S009", "Grace Lee", 3.88),
    ("S010", "Henry Martinez", 3.62),
]

DEMO_IDS = ["S001", "S005", "S010", "S999"]
DEMO_PREFIXES = ["Alice", "Ali", "A", "Bob", "Charlie", "Z"]

WIDTH = 80


def print_header(title: str) -> None:
    print("\n" + "=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def print_results(results: Sequence[Record]) -> None:
    if not results:
        print("❌ No records found.")
        return
    print(f"✓ Found {len(results)} record(s):")
    print("-" * WIDTH)
    for record in results:
        print(f"  {record}")


def run_demo(store: Optional[RecordStore] = None) -> RecordStore:
    """Run every phase against store (a fresh one by default) and return it."""
    store = store if store is not None else RecordStore()

    print_header("RECORD SEARCH DEMO")
    print("Architecture: hash index (ids) + prefix trie (names)")

    print_header("PHASE 1: ADDING RECORDS")
    print(f"\nAdding {len(SAMPLE_RECORDS)} records...")
    for key, label, score in SAMPLE_RECORDS:
        record = Record(key, label, score)
        store.add(record)
        print(f"  ✓ Added: {record}")
    print(f"\n✓ Total records: {store.size()}")

    print_header("PHASE 2: ID LOOKUP (hash index)")
    for key in DEMO_IDS:
        print(f"\n🔍 Searching for ID: {key}")
        start = time.perf_counter_ns()
        record = store.search_by_id(key)
        elapsed = time.perf_counter_ns() - start
        print(f"  ✓ FOUND: {record}" if record else "  ❌ NOT FOUND")
        print(f"  ⏱ Time: {elapsed} ns")

    print_header("PHASE 3: NAME PREFIX LOOKUP (trie)")
    for prefix in DEMO_PREFIXES:
        print(f"\n🔍 Searching for names starting with: '{prefix}'")
        start = time.perf_counter_ns()
        results = store.search_by_name(prefix)
        elapsed = time.perf_counter_ns() - start
        print_results(results)
        print(f"  ⏱ Time: {elapsed} ns")

    print_header("PHASE 4: STATISTICS")
    stats = store.stats()
    key_stats = stats["key_index"]
    trie_stats = stats["name_trie"]
    print(f"\n📊 Records: {stats['record_count']}")
    print(f"  • Key index: capacity {key_stats['capacity']}, "
          f"load factor {key_stats['load_factor']} "
          f"(resize above {key_stats['load_factor_threshold']}), "
          f"longest chain {key_stats['longest_chain']}")
    print(f"  • Name trie: {trie_stats['node_count']} nodes, "
          f"{trie_stats['terminal_nodes']} distinct names")

    print_header("PHASE 5: EDGE CASES")
    print(f"\n🧪 Empty prefix: {len(store.search_by_name(''))} records (expected: 0)")
    lower = store.search_by_name("alice")
    upper = store.search_by_name("ALICE")
    print(f"🧪 Case insensitive: 'alice'={len(lower)} 'ALICE'={len(upper)} "
          f"match={lower == upper}")
    missing = store.search_by_id("S999")
    print(f"🧪 Unknown id: {'None (expected)' if missing is None else 'ERROR'}")

    print_header("PHASE 6: ALL RECORDS")
    print()
    for position, record in enumerate(store.all_records(), 1):
        print(f"{position}. {record}")

    print_header("DEMO COMPLETE")
    return store
