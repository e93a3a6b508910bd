'''Various utility functions for other modules of Rankvote.

There should normally be no need to use these functions directly.
'''

from typing import Iterable, List

from rankvote.candidate import Candidate
from rankvote.vote import Ranking


def first_preferences(ballots: Iterable[Ranking],
                      n_candidates: int,
                      ) -> List[int]:
    '''Count the first choices of the ballots, indexed by candidate.

    Empty ballots (abstentions) are skipped; lower preferences are ignored.

    :param ballots: Ranked ballots.
    :param n_candidates: Number of candidates (length of the output).
    '''
    counts = [0] * n_candidates
    for ranking in ballots:
        if ranking:
            counts[ranking[0]] += 1
    return counts


def sorted_by_votes(counts: List[int]) -> List[Candidate]:
    '''Return all candidates sorted by descending vote count.

    The sort is stable so candidates with equal counts stay in ascending
    order of their indices.

    :param counts: Vote counts indexed by candidate.
    '''
    return [
        Candidate(i) for i in sorted(
            range(len(counts)),
            key=counts.__getitem__,
            reverse=True    # reverse sorting keeps equal items in order
        )
    ]
