"""Classifying strings as naughty or nice."""

_VOWELS = "aeiou"
_FORBIDDEN = {"ab", "cd", "pq", "xy"}


def _pairs(name: str):
    return (a + b for a, b in zip(name, name[1:]))


def is_nice(name: str) -> bool:
    """Apply the first set of rules: three vowels, a doubled letter and no
    forbidden pair."""
    vowels = sum(1 for char in name if char in _VOWELS)
    pairs = list(_pairs(name))
    doubled = any(pair[0] == pair[1] for pair in pairs)
    forbidden = any(pair in _FORBIDDEN for pair in pairs)
    return vowels >= 3 and doubled and not forbidden


def _has_repeated_pair(name: str) -> bool:
    seen = set()
    for index, pair in enumerate(_pairs(name)):
        first = pair[0]
        # Skip the middle pair of a run of exactly three, which would overlap.
        if (
            first == pair[1]
            and first == name[index + 2 : index + 3]
            and first != name[index + 3 : index + 4]
        ):
            continue
        if pair in seen:
            return True
        seen.add(pair)
    return False


def _has_split_repeat(name: str) -> bool:
    return any(a == c for a, c in zip(name, name[2:]))


def is_nicer(name: str) -> bool:
    """Apply the second set of rules: a non-overlapping repeated pair and a
    letter repeated with one letter between."""
    return _has_repeated_pair(name) and _has_split_repeat(name)


def part_one(text: str) -> int:
    """Return how many lines are nice under the first rules."""
    return sum(1 for line in text.splitlines() if is_nice(line))


def part_two(text: str) -> int:
    """Return how many lines are nice under the second rules."""
    return sum(1 for line in text.splitlines() if is_nicer(line))