import sys
import os
import pickle
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from rankvote.candidate import Candidate, CandidateError


@pytest.mark.parametrize('index', [0, 1, 7, 10 ** 6])
def test_valid(index):
    cand = Candidate(index)
    assert cand == index
    assert cand.index == index
    assert hash(cand) == hash(index)
    assert repr(cand) == f'Candidate({index})'


@pytest.mark.parametrize('index', [-1, -100, True, False, 1.0, '1', None, Fraction(1, 2)])
def test_invalid(index):
    with pytest.raises(CandidateError) as excinfo:
        Candidate(index)
    assert excinfo.value.candidate is index


def test_equality_by_index():
    assert Candidate(3) == Candidate(3)
    assert Candidate(3) != Candidate(4)
    assert len({Candidate(2), Candidate(2), 2}) == 1


def test_immutable():
    cand = Candidate(2)
    with pytest.raises(AttributeError):
        cand.foo = 1


def test_usable_as_index():
    assert ['a', 'b', 'c'][Candidate(1)] == 'b'


def test_pickle():
    cand = pickle.loads(pickle.dumps(Candidate(5)))
    assert isinstance(cand, Candidate)
    assert cand == 5
