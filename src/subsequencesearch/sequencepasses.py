def delete_at(sequence, i):
    """Returns sequence with the element at position i removed. The result
    has the same type as sequence."""
    return sequence[:i] + sequence[i + 1 :]


def count_candidates(n):
    """Number of predicate evaluations an unsuccessful search over a
    sequence of length n performs: the whole sequence plus every non-empty
    proper subsequence of it."""
    if n <= 0:
        return 0
    return 2 ** n - 1


def covers_candidates(max_evaluations, n):
    """Returns whether max_evaluations is at least count_candidates(n),
    without building 2 ** n for large n."""
    if n <= 0:
        return True
    if n > max_evaluations.bit_length():
        return False
    return max_evaluations >= count_candidates(n)


def deletion_candidates(sequence):
    """Yields every subsequence that can be formed by deleting between 1 and
    len(sequence) - 1 elements from sequence, never reordering what is left.

    Candidates come out in order of increasing number of deletions, and
    for a fixed number of deletions in ascending lexicographic order of
    the deleted positions. e.g. for [0, 1, 2] this is [1, 2], [0, 2],
    [0, 1], [2], [1], [0].
    """
    for level in range(len(sequence) - 1):
        yield from _delete_from(sequence, level, 0)


def _delete_from(current, level, start):
    # level is the number of deletions still needed after this one.
    if len(current) == 1:
        return
    for i in range(start, len(current)):
        reduced = delete_at(current, i)
        if level == 0:
            yield reduced
        else:
            # Continuing from i keeps each combination unique and ordered.
            yield from _delete_from(reduced, level - 1, i)
