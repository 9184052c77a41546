import logging
from collections.abc import Iterable
from pathlib import Path

from . import ir
from .errors import ParseError
from .parser_impl import parse_force

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """
    Read a schema file as UTF-8 text.

    Raises:
        ParseError: If the file cannot be read or is not valid UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ParseError(f"{path}: cannot read file ({e.strerror or e})") from e


def load_force(path: Path) -> ir.Force:
    """
    Read and parse a single schema file.

    Args:
        path: Path to a .force file

    Returns:
        The parsed Force

    Raises:
        ParseError: If the file cannot be read, tokenized or parsed
    """
    text = read_source(path)
    return parse_force(text, path)


def load_forces(files: Iterable[Path]) -> dict[Path, ir.Force]:
    """
    Parse schema files one by one.

    The first file that fails to parse aborts the whole load.

    Args:
        files: Schema file paths

    Returns:
        Mapping of each path to its Force, in the order given
    """
    forces: dict[Path, ir.Force] = {}
    for f in files:
        force = load_force(f)
        logger.debug("Loaded %s: %d categor(ies)", f, len(force.categories))
        forces[f] = force
    return forces


def merge_forces(forces: Iterable[ir.Force]) -> ir.Force:
    """
    Combine several Forces into one.

    Categories follow the same rule as within a file: a later declaration of a
    name replaces the earlier one.
    """
    categories: dict[str, ir.Category] = {}
    links: dict[tuple[str, ir.Linkee], ir.Link] = {}
    for force in forces:
        for name, category in force.categories.items():
            if name in categories:
                logger.warning("Category %r declared in more than one file; last one wins", name)
            categories[name] = category
        links.update(force.links)
    return ir.Force(categories=categories, links=links)
