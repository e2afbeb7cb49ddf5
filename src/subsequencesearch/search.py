import attr
import subsequencesearch.sequencepasses as sequences


@attr.s
class Budget(object):
    """Number of predicate evaluations a single search may still perform."""

    limit = attr.ib()
    remaining = attr.ib()

    @classmethod
    def of(cls, limit):
        return cls(limit=limit, remaining=limit)

    @property
    def exhausted(self):
        return self.remaining <= 0

    @property
    def spent(self):
        return self.limit - self.remaining

    def spend(self):
        self.remaining -= 1


class SubsequenceSearch(object):
    def __init__(self, target, sequence, predicate, max_evaluations, debug=False):
        self.target = target
        self.sequence = sequence
        self.__predicate = predicate
        self.__debug = debug
        self.budget = Budget.of(max_evaluations)
        self.budget_exhausted = False
        self.evaluations = 0
        self.__level = None

    def debug(self, *args, **kwargs):
        """Equivalent to print if debugging is enabled, otherwise a no-op."""
        if self.__debug:
            print(*args, **kwargs)

    @property
    def not_found(self):
        return self.sequence[:0]

    def predicate(self, candidate):
        """Spends one evaluation from the budget and tests candidate."""
        self.budget.spend()
        self.evaluations += 1
        return self.__predicate(self.target, candidate)

    def run(self):
        """Returns the first subsequence of self.sequence that satisfies the
        predicate, preferring fewer deletions, or an empty sequence if there
        is none or the budget runs out first.

        The whole sequence is always tested, even when the budget starts
        out at zero or below."""
        if len(self.sequence) == 0:
            self.debug("Empty sequence, nothing to search")
            return self.not_found

        self.debug(f"Checking full sequence of length {len(self.sequence)}")
        if self.predicate(self.sequence):
            return self.sequence

        for candidate in sequences.deletion_candidates(self.sequence):
            if self.budget.exhausted:
                self.budget_exhausted = True
                self.debug(
                    f"Hit the limit of {self.budget.limit} predicate evaluations"
                )
                return self.not_found
            level = len(self.sequence) - len(candidate) - 1
            if level != self.__level:
                self.__level = level
                self.debug(f"Trying candidates with {level + 1} deletions")
            if self.predicate(candidate):
                self.debug(
                    f"Found match of length {len(candidate)} after {self.evaluations} evaluations"
                )
                return candidate

        self.debug(f"No match after {self.evaluations} evaluations")
        return self.not_found


def find_matching_subsequence(
    target, sequence, predicate, max_evaluations, debug=False
):
    """Finds a subsequence of sequence, formed by deleting elements but
    never reordering them, for which predicate(target, subsequence) is
    true.

    Candidates are tried with as few deletions as possible first, and for
    a given number of deletions in ascending order of deleted positions:

        [0, 1, 2, 3]
        [1, 2, 3]
        [0, 2, 3]
        [0, 1, 3]
        [0, 1, 2]
        [2, 3]
        [1, 3]
        [1, 2]
        [0, 3]
        [0, 2]
        [0, 1]
        [3]
        [2]
        [1]
        [0]

    At most max_evaluations calls to predicate are made, except that the
    unmodified sequence is always checked once. Returns an empty sequence
    of the same type as sequence if nothing matches within that limit.
    Exceptions raised by predicate are not caught.
    """
    return SubsequenceSearch(
        target, sequence, predicate, max_evaluations, debug=debug
    ).run()
