'''Candidate specification.

Candidates are plain non-negative integer indices, numbered contiguously
from zero. The :class:`Candidate` type wraps such an index so that it cannot be
mixed up with vote counts or ballot positions, while still behaving as an
integer (it can be used for indexing and compares equal to its index).
'''

from __future__ import annotations

import numbers
from typing import Any


class CandidateError(Exception):
    '''A candidate is invalid in the given context.

    :param candidate: Candidate that was found to be invalid.
    :param expected: Definition of a candidate that was expected.
    '''
    def __init__(self, candidate: Any, expected: Any = None):
        self.candidate = candidate
        self.expected = expected
        message = f'invalid candidate: {candidate!r}'
        if expected:
            message += f', must be {expected}'
        super().__init__(message)


class Candidate(int):
    '''An election candidate, identified by its index.

    Immutable. Booleans, negative numbers and non-integral values are
    rejected.

    :param index: Non-negative integer index of the candidate.
    :raises CandidateError: If the index is invalid.
    '''
    __slots__ = ()

    def __new__(cls, index: int) -> Candidate:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise CandidateError(index, 'an integer index')
        if index < 0:
            raise CandidateError(index, 'a non-negative index')
        return super().__new__(cls, index)

    def __repr__(self) -> str:
        return f'Candidate({int(self)})'

    def __reduce__(self):
        return (self.__class__, (int(self), ))

    @property
    def index(self) -> int:
        '''The bare integer index of the candidate.'''
        return int(self)
