'''General voting rule machinery.'''

from __future__ import annotations

import abc
from typing import Union

from rankvote.candidate import Candidate
from rankvote.poll import Poll
from rankvote.vote import Ranking


class VotingSystemError(Exception):
    '''A voting rule with a valid setup ended up in an unresolvable state.'''
    pass


class Tie(frozenset):
    '''Candidates tied for first place.

    This object, a subclass of ``frozenset``, is returned by voting rules
    instead of a ranking when they cannot determine a unique winner under
    their tie-breaking policy - for example, by plurality when two or more
    candidates have the same highest number of first preferences.

    A tie is a regular election outcome and not an error; no exception is
    raised for it.
    '''
    @staticmethod
    def any(result: ElectionResult) -> bool:
        '''Return True if the election result is a tie, False otherwise.'''
        return isinstance(result, Tie)

    def __repr__(self) -> str:
        return 'Tie({!r})'.format(sorted(self))


ElectionResult = Union[Ranking, Tie]


class VotingRule(metaclass=abc.ABCMeta):
    '''A voting rule, turning a poll into a ranking of all candidates.

    A root abstract base class for all rules. Rules carry no state: the
    election is a class method and the rule type itself is passed around
    wherever a rule is expected.
    '''
    @classmethod
    @abc.abstractmethod
    def election(cls, poll: Poll) -> ElectionResult:
        '''Run an election on the poll.

        :param poll: Ballots to evaluate. Never modified.
        :returns: Either a tuple ranking every candidate in
            ``range(poll.n_candidates())`` exactly once, winner first,
            or a :class:`Tie` if no unique winner can be determined.
        :raises EmptyPoll: If the poll contains no ranked candidate.
        '''
        raise NotImplementedError

    @classmethod
    def winner(cls, poll: Poll) -> Union[Candidate, Tie]:
        '''Return the winning candidate of the election, or a tie.'''
        result = cls.election(poll)
        if Tie.any(result):
            return result
        return result[0]
