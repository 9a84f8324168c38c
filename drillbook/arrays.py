"""Array puzzles: pair and tuple sums, medians, containers and in-place filtering."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]`` (``i < j``) of two numbers adding up to ``target``.

    The pair that completes first, scanning left to right, is returned.
    An empty list means no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen.setdefault(value, index)
    return []


def median_of_two_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the values of two sorted sequences taken together."""
    merged: list[int] = []
    i = j = 0
    while i < len(nums1) and j < len(nums2):
        if nums1[i] <= nums2[j]:
            merged.append(nums1[i])
            i += 1
        else:
            merged.append(nums2[j])
            j += 1
    merged.extend(nums1[i:])
    merged.extend(nums2[j:])

    if not merged:
        raise ValueError("the median of no values is undefined")
    mid, odd = divmod(len(merged), 2)
    if odd:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2.0


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines in ``height``."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        low = min(height[left], height[right])
        best = max(best, low * (right - left))
        if height[left] <= height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values summing to zero.

    Each triplet is in ascending order and the triplets are listed in
    ascending order of their elements.
    """
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    i = 0
    while i < n - 2:
        j, k = i + 1, n - 1
        goal = -values[i]
        while j < k:
            pair = values[j] + values[k]
            if pair < goal:
                j += 1
            elif pair > goal:
                k -= 1
            else:
                found.append([values[i], values[j], values[k]])
                j += 1
                while j < k and values[j - 1] == values[j]:
                    j += 1
                k -= 1
                while j < k and values[k + 1] == values[k]:
                    k -= 1
        i += 1
        while i < n - 2 and values[i - 1] == values[i]:
            i += 1
    return found


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of values summing to ``target``.

    Each quadruplet is in ascending order and the quadruplets are listed in
    ascending order of their elements.
    """
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    for a in range(n - 3):
        if a and values[a - 1] == values[a]:
            continue
        for b in range(a + 1, n - 2):
            if b != a + 1 and values[b - 1] == values[b]:
                continue
            c, d = b + 1, n - 1
            while c < d:
                total = values[a] + values[b] + values[c] + values[d]
                if total == target:
                    found.append([values[a], values[b], values[c], values[d]])
                    c += 1
                    while c < d and values[c - 1] == values[c]:
                        c += 1
                elif total < target:
                    c += 1
                else:
                    d -= 1
    return found


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first ``k`` items are distinct; return ``k``."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if value > nums[k - 1]:
            nums[k] = value
            k += 1
    return k


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front in place; return how many there are.

    Items are filled in from the end, so their order is not kept.
    """
    k, end = 0, len(nums)
    while k < end:
        if nums[k] == val:
            end -= 1
            nums[k] = nums[end]
        else:
            k += 1
    return k