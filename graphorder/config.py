# graphorder.config

import copy
import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from graphorder.types import Config

DEFAULTS: Config = {
    'algorithm': 'kahn',
    'reverse':   False,
    'separator': ' ',
    'log_level': 'WARNING',
}

def merge(source: Mapping[str, Any], extension: Mapping[str, Any]) -> Config:
    '''Return the result of overlaying the specified 'extension' onto the
    specified 'source'.  Nested mappings are merged recursively, lists are
    concatenated and any other value in 'extension' replaces the one in
    'source'.  Neither argument is modified.'''
    result = copy.deepcopy(dict(source))
    for k, value in extension.items():
        if k not in result:
            result[k] = copy.deepcopy(value)
        elif isinstance(result[k], Mapping) and isinstance(value, Mapping):
            result[k] = merge(result[k], value)
        elif isinstance(result[k], list) and isinstance(value, list):
            result[k] = result[k] + copy.deepcopy(value)
        else:
            result[k] = copy.deepcopy(value)
    return result

class InvalidConfigError(RuntimeError):
    pass

def parse_config(path: Path) -> Config:
    if not path.is_file():
        return {}

    try:
        with path.open(encoding='utf-8') as f:
            config = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidConfigError(str(path), str(e))

    if not isinstance(config, dict):
        raise InvalidConfigError(str(path), 'expected a JSON object')
    return config

def load(paths: Iterable[Path]) -> Config:
    '''Return the defaults extended by each of the rc files at the specified
    'paths', later files taking precedence.'''
    config = copy.deepcopy(DEFAULTS)
    for path in paths:
        config = merge(config, parse_config(path))
    return config
