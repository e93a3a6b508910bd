'''The poll: a collection of ranked ballots to be evaluated.'''

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from rankvote.candidate import Candidate
from rankvote.vote import Ranking, RankingValidator, VoteTypeError


logger = logging.getLogger(__name__)


class EmptyPoll(Exception):
    '''No candidate can be derived from the ballots of a poll.

    Raised for polls with no ballots at all or with abstentions only.
    This is a legitimate (if degenerate) input: nobody cast a vote.

    :param n_ballots: Number of (empty) ballots in the poll.
    '''
    def __init__(self, n_ballots: int = 0):
        self.n_ballots = n_ballots
        super().__init__(
            f'empty poll: no candidates ranked in {n_ballots} ballots'
        )


class Poll:
    '''A collection of ranked ballots.

    The ballots are copied into tuples of :class:`Candidate` objects upon
    construction and never modified afterwards, so a poll may be shared by
    any number of elections.

    :param ballots: Ballots, each an iterable of candidate indices ordered
        from the most to the least preferred. Empty ballots are abstentions.
    :param validator: A validator to check each ballot with, such as
        :class:`rankvote.vote.RankingValidator`. If None, only the candidate
        indices themselves are checked.
    :raises VoteTypeError: If any ballot is not iterable, e.g. when a flat
        list of candidates is passed instead of a list of ballots.
    :raises CandidateError: If any ballot contains an invalid candidate index.
    :raises VoteError: If the validator rejects any ballot.
    '''
    __slots__ = ('_ballots', )

    def __init__(self,
                 ballots: Iterable[Iterable[int]] = (),
                 validator: Optional[RankingValidator] = None,
                 ):
        converted = []
        for ballot in ballots:
            try:
                items = iter(ballot)
            except TypeError as e:
                raise VoteTypeError(ballot, tuple) from e
            converted.append(tuple(Candidate(cand) for cand in items))
        converted = tuple(converted)
        if validator is not None:
            for ballot in converted:
                validator.validate(ballot)
        self._ballots = converted

    @property
    def ballots(self) -> Tuple[Ranking, ...]:
        return self._ballots

    def __len__(self) -> int:
        return len(self._ballots)

    def __iter__(self) -> Iterator[Ranking]:
        return iter(self._ballots)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Poll):
            return NotImplemented
        return self._ballots == other._ballots

    def __hash__(self) -> int:
        return hash(self._ballots)

    def __repr__(self) -> str:
        return 'Poll({!r})'.format(
            [[int(cand) for cand in ballot] for ballot in self._ballots]
        )

    def n_candidates(self) -> int:
        '''Return the number of candidates implied by the ballots.

        This is one more than the highest candidate index ranked in any
        ballot, since candidates are numbered contiguously from zero.

        :raises EmptyPoll: If no ballot ranks any candidate.
        '''
        highest = max(
            (cand for ballot in self._ballots for cand in ballot),
            default=None
        )
        if highest is None:
            logger.debug('no candidates in %d ballots', len(self._ballots))
            raise EmptyPoll(len(self._ballots))
        return highest + 1

    def n_abstentions(self) -> int:
        '''Return the number of empty ballots.'''
        return sum(1 for ballot in self._ballots if not ballot)
