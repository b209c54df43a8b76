"""Weighted edit distance used to order the search frontier."""

from lexipath.core.costs import CostModel


def distance(source: str, target: str, costs: CostModel) -> int:
    """Weighted Levenshtein distance from `source` to `target`.

    Deleting a character of `source` costs `costs.delete`, inserting a
    character of `target` costs `costs.insert` and replacing a mismatched
    character costs `costs.substitute`. The anagram operation is not modelled,
    so the result can overestimate when a cheap rearrangement is available.

    The distance is not symmetric when insert and delete costs differ.
    """
    insert_cost = costs.insert
    delete_cost = costs.delete
    substitute_cost = costs.substitute

    # previous[j] holds the distance from source[:i - 1] to target[:j]
    previous = [j * insert_cost for j in range(len(target) + 1)]
    for i, source_char in enumerate(source, 1):
        current = [i * delete_cost]
        for j, target_char in enumerate(target, 1):
            change = 0 if source_char == target_char else substitute_cost
            current.append(
                min(
                    previous[j] + delete_cost,
                    current[j - 1] + insert_cost,
                    previous[j - 1] + change,
                )
            )
        previous = current
    return previous[-1]
