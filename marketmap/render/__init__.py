"""HTML visualization of saved stock records."""

from .treemap import build_treemap_data, render_treemap, render_treemap_html

__all__ = ["build_treemap_data", "render_treemap", "render_treemap_html"]
