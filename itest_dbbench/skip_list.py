"""
Skipped query lookup in the Qserv integration tests configuration.

`integration_tests.yaml` lists, for some test cases, query numbers that must
not be run. The layout of that file has changed over time, so instead of
binding it to a fixed schema the loader walks the YAML node tree and looks for
any mapping shaped like:

    - id: case01
      skip_numbers:
        - "0003"
        - "0012"

Usage:
    from itest_dbbench.skip_list import get_skipped_queries

    skipped = get_skipped_queries(Path("integration_tests.yaml"), "case01")
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set

import yaml

from itest_dbbench.domain.errors import SkipListFormatError
from itest_dbbench.domain.models import SkipList
from itest_dbbench.utils.logging import get_logger

log = get_logger(__name__)

ID_KEY = "id"
SKIP_KEY = "skip_numbers"


def _is_key(node: yaml.Node, name: str) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.value == name


def _collect_skip_numbers(mapping: yaml.MappingNode, out: List[str]) -> None:
    for key, value in mapping.value:
        if not _is_key(key, SKIP_KEY):
            continue
        if not isinstance(value, yaml.SequenceNode):
            raise SkipListFormatError(f"encountered non-list task at {value.start_mark}")
        for item in value.value:
            if not isinstance(item, yaml.ScalarNode):
                raise SkipListFormatError(f"encountered non-scalar skip number at {item.start_mark}")
            out.append(item.value)


def _descend(node: Optional[yaml.Node], case_id: str, out: List[str], seen: Set[int]) -> None:
    # Aliases resolve to the anchored node itself; walk each node once.
    if isinstance(node, yaml.CollectionNode):
        if id(node) in seen:
            return
        seen.add(id(node))
    if isinstance(node, yaml.SequenceNode):
        for item in node.value:
            _descend(item, case_id, out, seen)
    elif isinstance(node, yaml.MappingNode):
        found = False
        for key, value in node.value:
            if not _is_key(key, ID_KEY):
                _descend(value, case_id, out, seen)
                continue
            if not isinstance(value, yaml.ScalarNode):
                raise SkipListFormatError(f"encountered non-scalar task at {value.start_mark}")
            if value.value == case_id:
                found = True
                break
        if found:
            _collect_skip_numbers(node, out)


def get_skipped_queries(filename: Path | str, case_id: str) -> List[str]:
    """
    Return the skipped query ids declared for `case_id`, in document order.

    An unknown case yields an empty list. Structural problems (an `id` that is
    not a scalar, `skip_numbers` that is not a sequence) raise
    SkipListFormatError.
    """
    path = Path(filename)
    text = path.read_text(encoding="utf-8")
    try:
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise SkipListFormatError(f"in file {str(path)!r}: {exc}") from exc

    query_ids: List[str] = []
    try:
        _descend(root, case_id, query_ids, set())
    except SkipListFormatError as exc:
        raise SkipListFormatError(f"in file {str(path)!r}: {exc}") from exc

    log.info(
        f"Skipped queries for {case_id}: {', '.join(query_ids) or 'none'}",
        extra={"case_id": case_id, "skipped": len(query_ids), "config": str(path)},
    )
    return query_ids


def load_skip_list(filename: Path | str, case_id: str) -> SkipList:
    return SkipList(case_id=case_id, query_ids=tuple(get_skipped_queries(filename, case_id)))


__all__ = ["get_skipped_queries", "load_skip_list"]
