'''Ballot (ranking) specification and ballot validators.

A ballot ranks some of the candidates from the most to the least preferred.
It is represented by a tuple of :class:`Candidate` objects and may be a strict
prefix of all candidates; an empty tuple is an abstention. The same type
serves as the result of an election, where it orders all the candidates.

Ballot validators check individual ballots against the election rules. If a
ballot is invalid, they raise a subclass of :class:`VoteError` (or
:class:`CandidateError`, if a candidate contained in the ballot is invalid).
The :class:`Poll` constructor accepts a validator to check all ballots upon
construction.
'''

from typing import Any, Tuple, Optional

from rankvote.candidate import Candidate, CandidateError
from rankvote.persist import simple_serialization


Ranking = Tuple[Candidate, ...]

IntBoundsTupleType = Tuple[Optional[int], Optional[int]]


class VoteError(Exception):
    '''A ballot is invalid given the election rules.'''
    pass


class VoteTypeError(VoteError):
    '''A ballot is of an invalid type.

    :param vtype: Ballot type detected as invalid.
    :param expected: Ballot type that was expected.
    '''
    def __init__(self, vtype: Any, expected: type = None):
        self.vtype = vtype
        self.expected = expected
        message = f'invalid vote type: {vtype!r}'
        if expected:
            message += f', must be {expected.__name__}'
        super().__init__(message)


class VoteMagnitudeError(VoteError):
    '''A ballot ranks too few or too many candidates.

    :param value: Number of ranked candidates found to be invalid.
    :param min_value: Minimum number permissible.
    :param max_value: Maximum number permissible.
    '''
    def __init__(self,
                 value: int,
                 min_value: Optional[int] = None,
                 max_value: Optional[int] = None,
                 ):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        message = f'invalid number of ranked candidates: {value}'
        bounds = []
        if min_value is not None:
            bounds.append(f'>={min_value}')
        if max_value is not None:
            bounds.append(f'<={max_value}')
        if bounds:
            message += ', must be ' + ' and '.join(bounds)
        super().__init__(message)


@simple_serialization
class RankingValidator:
    '''Validate a ranked ballot.

    The ballot must be a tuple of valid candidates, each ranked at most once.

    :param length_bounds: A tuple with lower and upper bounds (inclusive) for
        the number of candidates a ballot can rank. None means the respective
        bound is not checked. The default allows empty ballots (abstentions).
    :param n_candidates: If given, candidate indices must be lower than this.
    '''
    def __init__(self,
                 length_bounds: IntBoundsTupleType = (None, None),
                 n_candidates: Optional[int] = None,
                 ):
        self.length_bounds = tuple(length_bounds)
        self.n_candidates = n_candidates

    def validate(self, vote: Ranking) -> None:
        '''Check if the ranked ballot is valid.

        The type checks (tuple ballot, :class:`Candidate` items) only apply
        when this is called directly; a :class:`Poll` converts its ballots to
        tuples of candidates before validating them.

        :param vote: Ranked ballot to be checked.
        :raises VoteTypeError: If the ballot is not a tuple.
        :raises CandidateError: If any of the ranked candidates is invalid.
        :raises VoteError: If any candidate is ranked more than once.
        :raises VoteMagnitudeError: If the number of ranked candidates is out
            of the specified bounds.
        '''
        if not isinstance(vote, tuple):
            raise VoteTypeError(vote, tuple)
        for cand in vote:
            if not isinstance(cand, Candidate):
                raise CandidateError(cand, Candidate.__name__)
            if self.n_candidates is not None and cand >= self.n_candidates:
                raise CandidateError(
                    cand, f'an index lower than {self.n_candidates}'
                )
        if len(set(vote)) < len(vote):
            raise VoteError(f'duplicated candidates: {vote}')
        min_len, max_len = self.length_bounds
        if (
            (min_len is not None and len(vote) < min_len)
            or (max_len is not None and len(vote) > max_len)
        ):
            raise VoteMagnitudeError(len(vote), min_len, max_len)
