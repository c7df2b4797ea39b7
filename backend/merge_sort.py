from course_store import Course


def merge_sort(courses: list[Course]) -> list[Course]:
    """
    Stable top-down merge sort by course_number. Returns a new list.

    Ordering is plain str comparison on the number as written (no case folding),
    so "CSCI100" < "MATH100" < "csci100". Equal numbers keep their input order.
    O(n log n) comparisons on every input; there is no already-sorted shortcut.
    """
    items = list(courses)
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    return _merge(left, right)


def _merge(left: list[Course], right: list[Course]) -> list[Course]:
    merged: list[Course] = []
    i = j = 0

    while i < len(left) and j < len(right):
        # <= takes the left element on ties, which keeps the sort stable
        if left[i].course_number <= right[j].course_number:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged
