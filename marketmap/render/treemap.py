"""Static Plotly treemap page rendered from stock records."""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import orjson
from jinja2 import Environment, PackageLoader, select_autoescape

from marketmap.models.config import RenderConfig
from marketmap.models.stock import Stock


logger = logging.getLogger(__name__)

TEMPLATE_NAME = "market_map.html"

_env = Environment(
    loader=PackageLoader("marketmap.render", "templates"),
    autoescape=select_autoescape(["html"]),
)


def _script_json(data: Any) -> str:
    """Serialize ``data`` for inline use in a <script> block."""
    text = orjson.dumps(data).decode("utf-8")
    # <, > and & only occur inside JSON strings, where \uXXXX is equivalent
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def build_treemap_data(stocks: Sequence[Stock]) -> list[dict[str, Any]]:
    """Per-stock treemap leaves."""
    return [
        {"name": stock.name, "ticker": stock.symbol, "value": stock.market_cap}
        for stock in stocks
    ]


def render_treemap_html(
    stocks: Sequence[Stock],
    settings: RenderConfig | None = None,
) -> str:
    """Render the treemap page as a string."""
    settings = settings or RenderConfig()
    template = _env.get_template(TEMPLATE_NAME)
    return template.render(
        settings=settings,
        stocks_json=_script_json(build_treemap_data(stocks)),
        root_id_json=_script_json(settings.root_id),
        root_label_json=_script_json(settings.root_label),
    )


def render_treemap(
    stocks: Sequence[Stock],
    path: Path | str,
    settings: RenderConfig | None = None,
) -> Path:
    """Render the treemap page and write it to ``path``."""
    path = Path(path)
    html = render_treemap_html(stocks, settings)
    path.write_text(html, encoding="utf-8")
    logger.info(f"Treemap with {len(stocks)} stocks written: {path}")
    return path
