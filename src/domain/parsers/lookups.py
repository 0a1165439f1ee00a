"""Static lookup tables for difficulty codes and tag IDs."""

import re

from domain.models.problem import UNKNOWN_DIFFICULTY

_INTEGER = re.compile(r"^-?\d+$")

DIFFICULTY_LABELS: dict[int, str] = {
    1: "入门",
    2: "普及-",
    3: "普及/提高-",
    4: "普及+/提高",
    5: "提高+/省选-",
    6: "省选/NOI-",
    7: "NOI/NOI+/CTSC",
}

TAG_NAMES: dict[int, str] = {
    1: "Simulation",
    2: "String",
    3: "Dynamic Programming",
    4: "Search",
    5: "Math",
    6: "Graph Theory",
    7: "Greedy",
    8: "Computational Geometry",
    9: "Brute Force Data Structures",
    10: "High Precision",
    11: "Tree",
    12: "Shortest Path",
    13: "Binary Search",
    14: "Sorting",
    15: "Prefix Sum",
    16: "Two Pointers",
    17: "Union-Find",
    18: "Segment Tree",
    19: "Fenwick Tree",
    20: "Number Theory",
    21: "Combinatorics",
    22: "Game Theory",
    23: "Bit Manipulation",
    24: "Hashing",
    25: "Divide and Conquer",
    26: "Recursion",
    27: "Breadth-First Search",
    28: "Depth-First Search",
    29: "Topological Sort",
    30: "Minimum Spanning Tree",
    31: "Network Flow",
    32: "Bipartite Graph",
    33: "Strongly Connected Components",
    34: "Lowest Common Ancestor",
    35: "Knapsack",
    36: "Interval DP",
    37: "Tree DP",
    38: "Bitmask DP",
    39: "Digit DP",
    40: "Monotonic Queue",
    41: "Monotonic Stack",
    42: "Heap",
    43: "Trie",
    44: "KMP",
    45: "Matrix Multiplication",
    46: "Fast Power",
    47: "Constructive",
    48: "Probability",
    49: "Enumeration",
    50: "Ad Hoc",
}


def as_code(value: object) -> int | None:
    """Interpret an upstream integer code, tolerating numeric strings."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.match(value.strip()):
        return int(value.strip())
    return None


def map_difficulty(code: object) -> str:
    """Resolve a numeric difficulty code to its tier label. Never fails."""
    label = DIFFICULTY_LABELS.get(as_code(code))
    if label is not None:
        return label

    raw = "" if code is None else str(code)
    return raw or UNKNOWN_DIFFICULTY


def map_tag(tag_id: object) -> str:
    """Resolve a tag ID; unknown IDs keep the raw value visible."""
    name = TAG_NAMES.get(as_code(tag_id))
    return name if name is not None else f"unknown tag({tag_id})"
