# graphorder

import argparse
import json
import logging
import pathlib
import sys
from typing import List, Optional, Sequence, TextIO

import graphorder
import graphorder.config
from graphorder.graph import CyclicGraphError
from graphorder.types import Config, Graph, Ordering

class NoGraphError(RuntimeError):
    pass

class InvalidGraphError(RuntimeError):
    pass

class InvalidArgumentsError(RuntimeError):
    pass

rc_paths = [pathlib.Path('~/.graphorderrc').expanduser(),
            pathlib.Path('.graphorderrc')]

def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
                      prog='graphorder',
                      description='Print the nodes of a directed graph in '
                                  'topologically sorted order')
    parser.add_argument('-a', '--algorithm',
                        choices=sorted(graphorder.ALGORITHMS),
                        help='ordering algorithm (default: kahn)')
    parser.add_argument('-r', '--reverse',
                        action='store_true',
                        default=None,
                        help='print the ordering in reverse')
    parser.add_argument('-s', '--separator', metavar='<separator>',
                        help='string printed between nodes')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        help='log debugging information')
    parser.add_argument('graph', metavar='<graph>',
                        help='JSON file mapping each node to the list of its '
                             'successors, or \'-\' for standard input')
    return parser

def load_graph(source: str, stdin: TextIO) -> Graph:
    try:
        if source == '-':
            graph = json.load(stdin)
        else:
            with pathlib.Path(source).open(encoding='utf-8') as f:
                graph = json.load(f)
    except FileNotFoundError:
        raise NoGraphError(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidGraphError(str(e))

    if not isinstance(graph, dict):
        raise InvalidGraphError('expected an object of node to successors')
    for node, successors in graph.items():
        if not isinstance(successors, list) or \
                       not all(isinstance(s, str) for s in successors):
            raise InvalidGraphError(f'successors of "{node}" are not a list '
                                    'of strings')
    return graph

def configure(args: argparse.Namespace, config: Config) -> Config:
    for key in ('algorithm', 'reverse', 'separator'):
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    if args.verbose:
        config['log_level'] = 'DEBUG'

    if not isinstance(config['algorithm'], str) or \
                             config['algorithm'] not in graphorder.ALGORITHMS:
        raise InvalidArgumentsError(
                         f'Unknown algorithm: {config["algorithm"]}, should '
                         f'be one of: {", ".join(sorted(graphorder.ALGORITHMS))}')
    level = config['log_level']
    if not isinstance(level, str) or \
                      not isinstance(logging.getLevelName(level.upper()), int):
        raise InvalidArgumentsError(
                              f'Unknown log level: {config["log_level"]}')
    if not isinstance(config['separator'], str):
        raise InvalidArgumentsError('separator should be a string')
    if not isinstance(config['reverse'], bool):
        raise InvalidArgumentsError('reverse should be true or false')
    return config

def run(stdin:    TextIO,
        stdout:   TextIO,
        raw_args: List[str],
        paths:    Sequence[pathlib.Path] = rc_paths) -> int:
    args   = get_parser().parse_args(raw_args)
    config = configure(args, graphorder.config.load(paths))

    logging.basicConfig(level=config['log_level'].upper())

    graph = load_graph(args.graph, stdin)
    sort  = graphorder.ALGORITHMS[config['algorithm']]
    ordering: Ordering = sort(graph)
    if config['reverse']:
        ordering = graphorder.reverse_of(ordering)

    print(config['separator'].join(ordering), file=stdout)
    return 0

def main(stdin:  TextIO                           = sys.stdin,
         stdout: TextIO                           = sys.stdout,
         stderr: TextIO                           = sys.stderr,
         args:   List[str]                        = sys.argv,
         paths:  Optional[Sequence[pathlib.Path]] = None) -> int:
    try:
        return run(stdin, stdout, args[1:], rc_paths if paths is None else paths)
    except NoGraphError as e:
        print(f'Could not find graph at: {e.args[0]}', file=stderr)
    except InvalidGraphError as e:
        print(f'Invalid graph: {e.args[0]}', file=stderr)
    except InvalidArgumentsError as e:
        print(e.args[0], file=stderr)
    except graphorder.config.InvalidConfigError as e:
        print(f'Invalid configuration at: {e.args[0]}: {e.args[1]}',
              file=stderr)
    except CyclicGraphError as e:
        print('Cyclic dependency error: {}'.format(', '.join(e.cycle)),
              file=stderr)
    return -1

if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
