"""Render page documents to HTML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .io_utils import PathLike, read_structured, warn, write_text
from .models import BuildConfig, PageSpec
from .nodes import root
from .render import render, render_all


def load_page(path: PathLike) -> PageSpec:
    data = read_structured(path)
    if data is None:
        data = {}
    return PageSpec.model_validate(data)


def load_build_config(path: PathLike) -> BuildConfig:
    data = read_structured(path) or {}
    return BuildConfig.model_validate(data)


def render_page(page: PageSpec) -> str:
    """Render a page; without a doctype the top-level nodes are concatenated."""
    nodes = page.to_nodes()
    if page.doctype is None:
        return render_all(nodes)
    return render(root(page.doctype, nodes))


def render_page_file(source: PathLike, output: PathLike) -> Path:
    page = load_page(source)
    if not page.children:
        warn(f"{source}: page has no content")
    return write_text(output, render_page(page))


@dataclass
class BuildResult:
    out_dir: Path
    written: List[Path] = field(default_factory=list)


def build_site(config_path: PathLike) -> BuildResult:
    """Render every page listed in a build config.

    Paths in the config are relative to the config file's directory.
    """
    config_file = Path(config_path)
    config = load_build_config(config_file)
    base_dir = config_file.parent
    out_dir = base_dir / config.out_dir

    result = BuildResult(out_dir=out_dir)
    if not config.pages:
        warn(f"{config_file}: no pages configured; nothing to build.")
        return result

    for entry in config.pages:
        written = render_page_file(base_dir / entry.source, out_dir / entry.output)
        result.written.append(written)
    return result


__all__ = [
    "BuildResult",
    "build_site",
    "load_build_config",
    "load_page",
    "render_page",
    "render_page_file",
]
