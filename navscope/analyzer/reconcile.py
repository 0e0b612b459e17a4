"""Link inferred TOC entries to inferred sections.

Reconciliation is a pure post-pass over two finished lists. Equal lengths
pair entries and sections by position. Otherwise each entry looks for a
section whose id matches its own directly or through the ``slide-<id>`` and
``slide<id>`` spellings; entries and sections left without a partner stay
unlinked.

Example
-------
>>> from navscope.models import Section, TocEntry
>>> linked = reconcile(
...     [TocEntry("intro", "Intro")],
...     [Section("slide-intro", "Intro", ""), Section("slide-2", "Next", "")],
... )
>>> [section.nav_ref for section in linked]
['intro', None]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from navscope._constants import POSITIONAL_ID_TEMPLATE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from navscope.models import Section, TocEntry


def candidate_section_ids(target: str) -> tuple[str, str, str]:
    """Return the section ids that may stand for the navigation target ``target``."""
    return (target, POSITIONAL_ID_TEMPLATE.format(index=target), f"slide{target}")


def find_section_index(
    sections: cabc.Sequence[Section], target: str
) -> int | None:
    """Return the index of the first section matching ``target``, or None."""
    candidates = candidate_section_ids(target)
    for index, section in enumerate(sections):
        if section.id in candidates:
            return index
    return None


def reconcile(
    toc_entries: cabc.Sequence[TocEntry], sections: cabc.Sequence[Section]
) -> tuple[Section, ...]:
    """Return ``sections`` with ``nav_ref`` set for every linked TOC entry.

    Parameters
    ----------
    toc_entries : Sequence[TocEntry]
        Finalised TOC entries in display order.
    sections : Sequence[Section]
        Extracted sections in document order.

    Returns
    -------
    tuple[Section, ...]
        New section values; the inputs are not modified. When several
        entries resolve to the same section, the last one wins.
    """
    if not toc_entries or not sections:
        return tuple(sections)
    if len(toc_entries) == len(sections):
        return tuple(
            dc.replace(section, nav_ref=entry.id)
            for entry, section in zip(toc_entries, sections, strict=True)
        )

    links: dict[int, str] = {}
    for entry in toc_entries:
        index = find_section_index(sections, entry.id)
        if index is not None:
            links[index] = entry.id
    return tuple(
        dc.replace(section, nav_ref=links[index]) if index in links else section
        for index, section in enumerate(sections)
    )


__all__ = ["candidate_section_ids", "find_section_index", "reconcile"]
