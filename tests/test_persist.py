import sys
import os
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import rankvote.persist
import rankvote.system
import rankvote.vote
import rankvote.evaluate
from rankvote.poll import Poll

OBJECTS = [
    rankvote.system.VotingSystem('Mayor', rankvote.evaluate.Plurality),
    rankvote.vote.RankingValidator(),
    rankvote.vote.RankingValidator(length_bounds=(1, 3), n_candidates=5),
] + list(rankvote.system.get_available_systems().values())


@pytest.mark.parametrize('obj', OBJECTS)
def test_roundtrip(obj):
    dict_form = rankvote.persist.to_dict(obj)
    serial = json.dumps(dict_form)
    roundtrip_dict_form = rankvote.persist.from_dict(json.loads(serial)).to_dict()
    roundtrip = json.dumps(roundtrip_dict_form)
    assert dict_form == roundtrip_dict_form
    assert serial == roundtrip


def test_system_dict():
    system = rankvote.system.VotingSystem('Mayor', rankvote.evaluate.Plurality)
    assert rankvote.persist.to_dict(system) == {
        'class': 'rankvote.system.VotingSystem',
        'name': 'Mayor',
        'rule': {'rule': 'rankvote.evaluate.plurality.Plurality'},
    }


def test_system_equal():
    system = rankvote.system.VotingSystem('Mayor', rankvote.evaluate.Plurality)
    roundtripped = rankvote.persist.from_dict(
        json.loads(json.dumps(rankvote.persist.to_dict(system)))
    )
    assert roundtripped.rule is rankvote.evaluate.Plurality
    poll = Poll([[0], [0], [1]])
    assert roundtripped.evaluate(poll) == system.evaluate(poll)


def test_validator_equal():
    validator = rankvote.vote.RankingValidator(length_bounds=(1, 3))
    roundtripped = rankvote.persist.from_dict(rankvote.persist.to_dict(validator))
    assert roundtripped.length_bounds == (1, 3)
    with pytest.raises(rankvote.vote.VoteMagnitudeError):
        Poll([[]], validator=roundtripped)


@pytest.mark.parametrize('value', [
    [],
    {'name': 'Mayor'},
    {'class': '.relative.Name'},
    {'class': 'not an identifier'},
])
def test_from_dict_invalid(value):
    with pytest.raises(ValueError):
        rankvote.persist.from_dict(value)


@pytest.mark.parametrize('value', [
    {'class': 'rankvote.poll.Poll', 'ballots': [[0]]},
    {'class': 'rankvote.missing.Name'},
    {'class': 'rankvote.system.Missing'},
    {'class': 'rankvote.vote.RankingValidator', 'max_votes': 3},
    {'class': 'rankvote.system.VotingSystem', 'name': 'Mayor',
     'rule': {'rule': 'rankvote.system.VotingSystem'}},
    {'class': 'rankvote.system.VotingSystem', 'name': 'Mayor',
     'rule': {'rule': 'subprocess.Popen'}},
    {'class': 'rankvote.system.VotingSystem', 'name': 'Mayor',
     'rule': {'callable': 'os.getcwd'}},
])
def test_from_dict_rejects_unknown_objects(value):
    with pytest.raises(ValueError):
        rankvote.persist.from_dict(value)


def test_from_dict_does_not_call_outside_package(tmp_path):
    marker = tmp_path / 'created'
    with pytest.raises(ValueError) as excinfo:
        rankvote.persist.from_dict({
            'class': 'subprocess.run',
            'args': ['touch', str(marker)],
        })
    assert 'outside rankvote' in str(excinfo.value)
    assert not marker.exists()
