import json
import sys
import math

TOLERANCE = 1e-8


def _sort_key(item):
    if isinstance(item, dict) and 'from' in item and 'to' in item:
        return (item['from'], item['to'])
    return json.dumps(item, sort_keys=True)


def deep_compare(a, b, path="root"):
    """
    Compares an expected document `a` with an actual document `b` and
    returns a list of mismatch descriptions. Lists are compared
    order-insensitively; edge lists are ordered by (from, to).
    """
    if type(a) != type(b):
        return [f"Type mismatch at {path}: expected {type(a).__name__}, got {type(b).__name__}"]

    if isinstance(a, dict):
        a_keys = sorted(a.keys())
        b_keys = sorted(b.keys())
        if a_keys != b_keys:
            return [f"Key mismatch at {path}: expected {a_keys}, got {b_keys}"]
        problems = []
        for key in a_keys:
            problems.extend(deep_compare(a[key], b[key], path=f"{path}.{key}"))
        return problems

    if isinstance(a, list):
        if len(a) != len(b):
            return [f"List length mismatch at {path}: {len(a)} vs {len(b)}"]
        try:
            a_sorted = sorted(a, key=_sort_key)
            b_sorted = sorted(b, key=_sort_key)
        except TypeError:
            a_sorted, b_sorted = a, b
        problems = []
        for i, (x, y) in enumerate(zip(a_sorted, b_sorted)):
            problems.extend(deep_compare(x, y, path=f"{path}[{i}]"))
        return problems

    if isinstance(a, float):
        if not math.isclose(a, b, abs_tol=TOLERANCE):
            return [f"Float mismatch at {path}: expected {a}, got {b}"]
        return []

    if a != b:
        return [f"Value mismatch at {path}: expected {a!r}, got {b!r}"]
    return []


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: python compare_json.py <expected.json> <actual.json>")
        sys.exit(1)

    try:
        with open(sys.argv[1], 'r', encoding='utf-8') as f:
            expected_data = json.load(f)
        with open(sys.argv[2], 'r', encoding='utf-8') as f:
            actual_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error loading documents: {e}")
        sys.exit(1)

    problems = deep_compare(expected_data, actual_data)
    for problem in problems:
        print(f"FAIL: {problem}")
    sys.exit(1 if problems else 0)
