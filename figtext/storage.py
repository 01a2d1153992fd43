"""
figtext.storage - find and load font and control files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import logging
from pathlib import Path
from functools import cache

from .magic import NotFoundError
from .font import load_flf
from .controls import load_flc


DEFAULT_FONT = 'standard'

FONT_SUFFIX = '.flf'
CONTROL_SUFFIX = '.flc'

# environment variable holding font directories, separated by os.pathsep
FONTDIR_VARIABLE = 'FIGLET_FONTDIR'


def get_search_path(dirs=()):
    """Directories to search: given, then from environment, then current."""
    env_dirs = os.environ.get(FONTDIR_VARIABLE, '').split(os.pathsep)
    search_path = [Path(_d) for _d in (*dirs, *env_dirs) if _d]
    search_path.append(Path('.'))
    return search_path


def find_file(name, suffix, dirs=()):
    """Resolve font or control file name or path to an existing file path."""
    name = str(name)
    path = Path(name)
    names = [path.name]
    if path.suffix.lower() != suffix:
        names.append(path.name + suffix)
    # names with directory components are not looked up on the search path
    if path.is_absolute() or path.parent != Path('.'):
        search_path = [path.parent]
    else:
        search_path = get_search_path(dirs)
    candidates = [_dir / _n for _dir in search_path for _n in names]
    for candidate in candidates:
        if candidate.is_file():
            logging.debug('Found `%s` at `%s`.', name, candidate)
            return candidate.resolve()
    raise NotFoundError(f'Could not find file `{name}`.')


def list_files(suffix, dirs=()):
    """List names of files with given suffix on search path, sorted."""
    names = set()
    for path in get_search_path(dirs):
        if not path.is_dir():
            continue
        names.update(
            _file.stem for _file in path.iterdir()
            if _file.suffix.lower() == suffix and _file.is_file()
        )
    return sorted(names)


def list_fonts(dirs=()):
    """List available font names."""
    return list_files(FONT_SUFFIX, dirs)


def list_controls(dirs=()):
    """List available control file names."""
    return list_files(CONTROL_SUFFIX, dirs)


def load_font(name=DEFAULT_FONT, dirs=()):
    """Find and load a font by name or path."""
    return _load_font_file(find_file(name, FONT_SUFFIX, dirs))


def load_controls(name, dirs=()):
    """Find and load the transformation stages of a control file."""
    return _load_control_file(find_file(name, CONTROL_SUFFIX, dirs))


def load_control_chain(names, dirs=()):
    """Load stages of several control files, concatenated in the given order."""
    return tuple(
        _stage
        for _name in names
        for _stage in load_controls(_name, dirs)
    )


# fonts and control files are immutable once loaded
# cache on resolved path, as the same name may resolve elsewhere later

@cache
def _load_font_file(path):
    logging.debug('Loading font `%s`.', path)
    return load_flf(path)


@cache
def _load_control_file(path):
    logging.debug('Loading control file `%s`.', path)
    return load_flc(path)
