"""
The CLI can be accessed through the command ``lexpath``. For details on
valid subcommands, usage, and input options, refer to the ``--help`` / ``-h``
flag.

Every subcommand works on path strings only; nothing is looked up on the
filesystem. Paths are printed in the dialect given with ``-p/--platform``,
which defaults to the configured platform::

    $ lexpath -p windows join 'C:/Users' guido 'notes.txt'
    C:\\Users\\guido\\notes.txt
    $ lexpath ext archive.tar.gz
    gz
    $ lexpath parents /usr/local/etc
    /usr/local
    /usr
    /

Use ``parse`` to look at the structure of a path::

    $ lexpath parse '\\\\server\\share\\dir\\'
    volume: UNC(server='server', share='share')
    root: True
    body: dir
    trailing separator: True

Commands that have no answer for the given path (for example ``name ..``)
print nothing and exit with status 1.
"""
import argparse
import copy
import logging
import sys

import lexpath
from lexpath import settings
from lexpath import utils
from lexpath import Path
from lexpath.platforms import Platform

PRINT_CMDS = ('parse', 'render', 'join', 'parent', 'parents', 'name', 'stem', 'ext',
              'with-name', 'with-ext', 'isabs', 'split-list')


def perror(msg):
    """Print error message and exit."""
    sys.stderr.write(msg)
    sys.exit(1)


def get_path(pth):
    """Convert string to a Path.

    Raises:
        InvalidPathError: If the string is not a valid path. This is a
            ``ValueError``, so it is reported like any other bad input.
    """
    return Path.from_string(pth)


def _parse(path):
    return [
        'volume: %r' % (path.volume,),
        'root: %s' % path.has_root,
        'body: %s' % ' '.join(str(b) for b in path.body),
        'trailing separator: %s' % path.has_trailing_separator,
    ]


def _join(paths, platform=None):
    result = lexpath.EMPTY
    for p in paths:
        result = result.append(p, platform=platform)
    return result


def _isabs(path, platform=None):
    return str(path.is_absolute(platform))


def _split_list(value, platform=None):
    paths = utils.split_search_path(value, platform=platform)
    if paths is None:
        raise ValueError('invalid path list: %r' % value)
    return paths


def create_parser():
    parser = argparse.ArgumentParser(description='A command line interface for lexpath.')

    parser.add_argument('-c', '--config',
                        help='File containing configuration settings.',
                        type=str,
                        metavar='CONFIG_FILE')
    parser.add_argument('--version', help='Print version',
                        action='version',
                        version=str(lexpath.__version__))
    parser.add_argument('-p', '--platform',
                        help='Path dialect used for output and absoluteness checks.',
                        choices=[p.value for p in Platform],
                        default=None)
    parser.add_argument('-v', '--verbose',
                        help='Log why paths fail to parse.',
                        action='store_true')

    subparsers = parser.add_subparsers(dest='cmd')
    subparsers.required = True

    parse_msg = 'Show the volume, root, body and trailing separator of a path.'
    parser_parse = subparsers.add_parser('parse', help=parse_msg, description=parse_msg)
    parser_parse.add_argument('path', metavar='PATH')
    parser_parse.set_defaults(func=_parse)

    render_msg = 'Render a path in the selected dialect.'
    parser_render = subparsers.add_parser('render', help=render_msg, description=render_msg)
    parser_render.add_argument('path', metavar='PATH')
    parser_render.set_defaults(func=lambda path: path)

    join_msg = 'Append paths from left to right.'
    parser_join = subparsers.add_parser('join',
                                        help=join_msg,
                                        description='%s An absolute path replaces everything'
                                                    ' before it.' % join_msg)
    parser_join.add_argument('paths', nargs='+', metavar='PATH')
    parser_join.set_defaults(func=_join, platform_aware=True)

    parent_msg = 'Remove the last component of a path.'
    parser_parent = subparsers.add_parser('parent', help=parent_msg, description=parent_msg)
    parser_parent.add_argument('path', metavar='PATH')
    parser_parent.set_defaults(func=lexpath.parent)

    parents_msg = 'List all ancestors of a path, longest first.'
    parser_parents = subparsers.add_parser('parents', help=parents_msg, description=parents_msg)
    parser_parents.add_argument('path', metavar='PATH')
    parser_parents.set_defaults(func=lexpath.parents)

    name_msg = 'Print the file name of a path.'
    parser_name = subparsers.add_parser('name', help=name_msg, description=name_msg)
    parser_name.add_argument('path', metavar='PATH')
    parser_name.set_defaults(func=lexpath.file_name)

    stem_msg = 'Print the file name of a path without its extension.'
    parser_stem = subparsers.add_parser('stem', help=stem_msg, description=stem_msg)
    parser_stem.add_argument('path', metavar='PATH')
    parser_stem.set_defaults(func=lexpath.file_stem)

    ext_msg = 'Print the extension of a path, without the dot.'
    parser_ext = subparsers.add_parser('ext', help=ext_msg, description=ext_msg)
    parser_ext.add_argument('path', metavar='PATH')
    parser_ext.set_defaults(func=lexpath.extension)

    with_name_msg = 'Replace the file name of a path.'
    parser_with_name = subparsers.add_parser('with-name',
                                             help=with_name_msg,
                                             description=with_name_msg)
    parser_with_name.add_argument('name', metavar='NAME')
    parser_with_name.add_argument('path', metavar='PATH')
    parser_with_name.set_defaults(func=lexpath.set_file_name)

    with_ext_msg = 'Replace the extension of a path.'
    parser_with_ext = subparsers.add_parser('with-ext', help=with_ext_msg,
                                            description=with_ext_msg)
    parser_with_ext.add_argument('ext', metavar='EXT')
    parser_with_ext.add_argument('path', metavar='PATH')
    parser_with_ext.set_defaults(func=lexpath.set_extension)

    isabs_msg = 'Print whether a path is absolute.'
    parser_isabs = subparsers.add_parser('isabs', help=isabs_msg, description=isabs_msg)
    parser_isabs.add_argument('path', metavar='PATH')
    parser_isabs.set_defaults(func=_isabs, platform_aware=True)

    split_list_msg = 'Split a path list such as $PATH into one path per line.'
    parser_split_list = subparsers.add_parser('split-list',
                                              help=split_list_msg,
                                              description=split_list_msg)
    parser_split_list.add_argument('value', metavar='VALUE')
    parser_split_list.set_defaults(func=_split_list, platform_aware=True)

    return parser


def process_args(args):
    args_copy = copy.copy(vars(args))
    config = args_copy.pop('config', None)
    func = args_copy.pop('func', None)
    platform = args_copy.pop('platform', None)
    platform_aware = args_copy.pop('platform_aware', False)
    args_copy.pop('cmd', None)
    args_copy.pop('verbose', None)

    if config:
        settings.update(settings.parse_config_file(config))
    if platform_aware:
        args_copy['platform'] = platform
    try:
        if 'path' in args_copy:
            args_copy['path'] = get_path(args_copy['path'])
        if 'paths' in args_copy:
            args_copy['paths'] = [get_path(p) for p in args_copy['paths']]
        return func(**args_copy)
    except ValueError as exc:
        perror('Error: %s\n' % str(exc))


def print_results(results, platform=None):
    if results is None:
        sys.exit(1)
    if isinstance(results, (str, Path)):
        results = [results]
    for result in results:
        if isinstance(result, Path):
            result = result.render(platform)
        sys.stdout.write('%s\n' % result)


def main():
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    lexpath_logger = logging.getLogger('lexpath')
    lexpath_logger.addHandler(handler)

    settings._initialize()
    parser = create_parser()
    args = parser.parse_args()
    lexpath_logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    results = process_args(args)

    cmd = vars(args).get('cmd')
    if cmd in PRINT_CMDS:
        print_results(results, platform=args.platform)
