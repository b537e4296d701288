import os, yaml, typing

from os.path import join, abspath, normpath, dirname, realpath


LBCASE_PACKAGE_DIR  = abspath(normpath(dirname(realpath(__file__))))
LBCASE_TEMPLATE_DIR = abspath(join(LBCASE_PACKAGE_DIR, "templates"))

LBFLOW_GIT_URL = "https://github.com/gilberto-ribeiro/lbflow.git"


class LBCaseException(Exception):
    pass


def file_write(filepath: str, content: str, if_different: bool = False) -> bool:
    """
    Writes content to filepath. Returns False if if_different is set and the
    file already holds exactly that content.
    """
    try:
        if if_different and os.path.isfile(filepath):
            with open(filepath, "r") as f:
                if f.read() == content:
                    return False

        with open(filepath, "w") as f:
            f.write(content)
    except IOError as exc:
        raise LBCaseException(f'Failed to write to "{filepath}": {exc}') from exc

    return True


def file_read(filepath: str):
    try:
        with open(filepath, "r") as f:
            return f.read()
    except IOError as exc:
        raise LBCaseException(f'Failed to read from "{filepath}": {exc}') from exc


def file_load_yaml(filepath: str):
    try:
        with open(filepath, "r") as f:
            return yaml.safe_load(f)
    except (IOError, yaml.YAMLError) as exc:
        raise LBCaseException(f'Failed to load YAML from "{filepath}": {exc}') from exc


def file_dump_yaml(filepath: str, data) -> None:
    try:
        with open(filepath, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
    except (IOError, yaml.YAMLError) as exc:
        raise LBCaseException(f'Failed to dump YAML to "{filepath}": {exc}.') from exc


def create_directory(dirpath: str) -> None:
    try:
        os.makedirs(dirpath, exist_ok=True)
    except OSError as exc:
        raise LBCaseException(f'Failed to create directory "{dirpath}": {exc}') from exc


def isspace(s: str) -> bool:
    """
    Returns whether a string, s, is empty, whitespace, or None.
    """

    if s is None:
        return True

    return len(s.strip()) == 0


def format_list_to_string(arr: typing.List[str], item_style=None, empty=None):
    if empty is None:
        empty = "nothing"

    pre, post = "", ""
    if item_style is not None:
        pre  = f"[{item_style}]"
        post = f"[/{item_style}]"

    if len(arr) == 0:
        return f"{pre}{empty}{post}"

    if len(arr) == 1:
        return f"{pre}{arr[0]}{post}"

    if len(arr) == 2:
        return f"{pre}{arr[0]}{post} and {pre}{arr[1]}{post}"

    lhs = ', '.join([ f"{pre}{e}{post}" for e in arr[:-1]])
    rhs = f", and {pre}{arr[-1]}{post}"

    return lhs + rhs
