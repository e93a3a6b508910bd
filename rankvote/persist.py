'''Serialization of voting setups to JSON-ready dictionaries.

Voting systems and ballot validators are the configuration of an election;
:func:`to_dict` turns them into plain dictionaries that can be dumped as JSON
and :func:`from_dict` restores them. Voting rules, being stateless types, are
stored as references to their fully qualified names.

Only objects defined in Rankvote are restored: classes must carry the
``to_dict()`` method added by :func:`simple_serialization` and rule references
must name :class:`rankvote.evaluate.core.VotingRule` subclasses.
'''

import sys
import inspect
import importlib
from typing import Any, Dict


PACKAGE = 'rankvote'


def simple_serialization(class_: type) -> type:
    '''A decorator to provide a simple to_dict() serialization method.

    The resulting method will serialize all object attributes corresponding
    to the class's constructor parameter names, so the class must store its
    parameters unchanged (or in any other form acceptable to its constructor).

    :param class_: The class to add the method to.
    '''
    param_names = [
        name for name in inspect.signature(class_.__init__).parameters
        if name != 'self'
    ]

    def to_dict(self) -> Dict[str, Any]:
        out_dict = {'class': scoped_name(self.__class__)}
        for attr in param_names:
            out_dict[attr] = serialize_value(getattr(self, attr))
        return out_dict

    class_.to_dict = to_dict
    class_.serialize_params = param_names
    return class_


def serialize_value(value: Any) -> Any:
    if isinstance(value, type):
        return {'rule': scoped_name(value)}
    elif hasattr(value, 'to_dict'):
        return value.to_dict()
    elif value is None or isinstance(value, (str, int)):
        return value
    elif isinstance(value, tuple):
        return {'tuple': [serialize_value(item) for item in value]}
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def deserialize_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, int)):
        return value
    elif isinstance(value, dict):
        if 'class' in value:
            return deserialize_class(value)
        elif 'rule' in value:
            return get_rule_type(value['rule'])
        elif 'tuple' in value:
            return tuple(deserialize_value(item) for item in value['tuple'])
    raise ValueError(f'cannot deserialize {value!r}, type unknown')


def deserialize_class(clsdef: Dict[str, Any]) -> Any:
    cls = get_object(clsdef['class'])
    if not isinstance(cls, type) or not hasattr(cls, 'to_dict'):
        raise ValueError(f'not a serializable rankvote class: {cls!r}')
    params = {
        key: deserialize_value(val)
        for key, val in clsdef.items() if key != 'class'
    }
    unknown = set(params) - set(cls.serialize_params)
    if unknown:
        raise ValueError(f'unknown parameters for {cls.__name__}: '
                         + ', '.join(sorted(unknown)))
    return cls(**params)


def get_rule_type(identifier: str) -> type:
    import rankvote.evaluate.core
    rule = get_object(identifier)
    if not (
        isinstance(rule, type)
        and issubclass(rule, rankvote.evaluate.core.VotingRule)
    ):
        raise ValueError(f'not a voting rule: {identifier}')
    return rule


def get_object(identifier: str) -> Any:
    '''Look up a class or rule defined in the rankvote package.

    :raises ValueError: If the identifier is outside the package or does not
        name an existing object.
    '''
    if not is_scoped_identifier(identifier):
        raise ValueError(f'invalid rankvote identifier: {identifier!r}')
    module, _, name = identifier.rpartition('.')
    if module != PACKAGE and not module.startswith(PACKAGE + '.'):
        raise ValueError(f'refusing to load object outside {PACKAGE}: '
                         f'{identifier}')
    if module not in sys.modules:
        try:
            importlib.import_module(module)
        except ImportError as e:
            raise ValueError(f'unknown rankvote module: {module}') from e
    try:
        return getattr(sys.modules[module], name)
    except AttributeError as e:
        raise ValueError(f'unknown rankvote object: {identifier}') from e


def from_dict(value: Dict[str, Any]) -> Any:
    """Parse a voting setup object from a JSON-like dictionary.

    :param value: A dictionary created by :func:`to_dict`.
    :raises ValueError: If the dictionary does not describe a rankvote
        voting system or validator.
    """
    if not isinstance(value, dict):
        raise ValueError('invalid rankvote object def: dict expected, '
                         f'got {value!r}')
    elif 'class' not in value:
        raise ValueError('invalid rankvote object def: must have a class key')
    return deserialize_class(value)


def to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize a voting setup object to a JSON-ready dictionary.

    :param obj: A voting system or ballot validator.
    """
    return serialize_value(obj)


def is_scoped_identifier(value: Any) -> bool:
    return (
        isinstance(value, str)
        and '.' in value
        and all(chunk.isidentifier() for chunk in value.split('.'))
    )


def scoped_name(cls: type) -> str:
    return '.'.join((cls.__module__, cls.__qualname__))
