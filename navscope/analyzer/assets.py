"""Collect stylesheet and script references without interpreting them."""

from __future__ import annotations

import typing as typ

from navscope.models import AssetRef

if typ.TYPE_CHECKING:
    from navscope.tree import DocumentTree


def extract_styles(doc: DocumentTree) -> tuple[AssetRef, ...]:
    """Return inline ``<style>`` blocks followed by external stylesheet links."""
    styles = [AssetRef("inline", node.raw_text()) for node in doc.query_all("style")]
    for link in doc.query_all('link[rel="stylesheet"]'):
        href = link.attr("href")
        if href:
            styles.append(AssetRef("external", href))
    return tuple(styles)


def extract_scripts(doc: DocumentTree) -> tuple[AssetRef, ...]:
    """Return scripts in document order, skipping inline blocks that are blank."""
    scripts: list[AssetRef] = []
    for node in doc.query_all("script"):
        src = node.attr("src")
        if src:
            scripts.append(AssetRef("external", src))
            continue
        body = node.raw_text()
        if body.strip():
            scripts.append(AssetRef("inline", body))
    return tuple(scripts)


__all__ = ["extract_scripts", "extract_styles"]
