import copy
import json
import logging
import os
from itertools import count
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULTS = {
    'mst': {
        'algorithm': 'kruskal',
    },
}

CONFIG_ENV = 'MSTGRAPH_CONFIG'


def queryKey(q, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if not isinstance(dct, dict):
        k = '.'.join(prefix)
        raise KeyError(
            f"Query {k}.{q} error, type '{k}' is {type(dct)}, not dict.")
    try:
        sub = dct[keys[0]]
    except KeyError:
        k = '.'.join([*prefix, keys[0]])
        raise KeyError(
            f"Query {'.'.join([*prefix, q])} error, key '{k}' not found.")

    if len(keys) == 1:
        return sub

    else:
        return queryKey(keys[1], sub, [*prefix, keys[0]])


def query(q, dct, prefix=None):
    if isinstance(q, str):
        return queryKey(q, dct, prefix)
    elif isinstance(q, list):
        return [query(sub_q, dct, prefix) for sub_q in q]
    elif isinstance(q, tuple):
        return tuple([query(sub_q, dct, prefix) for sub_q in q])
    elif isinstance(q, set):
        return {sub_q: query(sub_q, dct, prefix) for sub_q in q}
    else:
        raise TypeError(f"Unsupported query type {type(q)}")


def setKey(q, value, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if len(keys) == 1:
        if keys[0] in dct and isinstance(dct[keys[0]],
                                         dict) and not isinstance(value, dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set a dict {k} to {type(value)}')
        else:
            dct[keys[0]] = value
    else:
        if keys[0] in dct and isinstance(dct[keys[0]], dict):
            sub = dct[keys[0]]
        elif keys[0] in dct and not isinstance(dct[keys[0]], dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set {k}.{keys[1]} but {k} is not a dict')
        else:
            sub = {}
            dct[keys[0]] = sub
        setKey(keys[1], value, sub, [*prefix, keys[0]])


def _merge(d, u):
    for k in u:
        if isinstance(u[k], dict):
            if k not in d:
                d[k] = copy.deepcopy(u[k])
            elif isinstance(d[k], dict):
                _merge(d[k], u[k])
            else:
                raise TypeError(f"can not merge dict into {k!r}")
        else:
            d[k] = u[k]


class Config(dict):
    """
    Nested settings with dotted-key access.

    A ``Config`` starts from ``DEFAULTS``. With a ``path`` it is backed by a
    JSON file: an existing file is merged over the defaults, a missing one
    is left untouched until ``commit``.
    """

    def __init__(self, path=None, backup=True, defaults=DEFAULTS):
        super().__init__()
        _merge(self, defaults)
        self.path = None if path is None else Path(path)
        self.backup = backup
        if self.path is not None and self.path.exists():
            self.reload()

    @classmethod
    def fromdict(cls, dct):
        cfg = cls()
        cfg.update(dct)
        return cfg

    def reload(self):
        with self.path.open('r') as f:
            dct = json.load(f)
        self.update(dct)
        log.info('loaded config from %s', self.path)

    def commit(self):
        if self.path is None:
            raise ValueError('config is not backed by a file')
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.backup and self.path.exists():
            for i in count():
                bk = self.path.parent / (self.path.stem + f"_{i}" +
                                         self.path.suffix)
                if not bk.exists():
                    break
            self.path.rename(bk)
        with self.path.open('w') as f:
            json.dump(self, f, indent=4)

    def update(self, other):
        _merge(self, other)

    def query(self, q):
        return query(q, self)

    def set(self, q, value):
        setKey(q, value, self)


_config = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config(os.environ.get(CONFIG_ENV) or None)
    return _config


def set_config(cfg) -> Config:
    global _config
    if cfg is None:
        _config = None
        return get_config()
    if not isinstance(cfg, Config):
        cfg = Config.fromdict(cfg)
    _config = cfg
    return _config


def load_config(path) -> Config:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"config file {path} not found")
    return set_config(Config(path))
