"""Setup-time composition of sortable tables from markup (BeautifulSoup version).

Given table markup such as::

    <table sortable-table>
      <thead><tr>
        <th sortable-header="title" sort-default="desc">Title</th>
        <th sortable-header="episodeCount">Episodes</th>
      </tr></thead>
      <tbody><tr ng-repeat="show in shows">...</tr></tbody>
    </table>

`compose_sortable_table` rewrites the row binding to carry the ordering
filter and builds the `HeaderBinding` for the declared headers. Any problem
raises a `SetupError`; a table that fails here must not be rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from bs4 import BeautifulSoup

from ..config import settings
from ..errors import MissingRowBindingError
from ..services.binding_expression import BindingExpression, OrderFilter
from ..services.event_bus import EventBus
from ..services.header_binding import HeaderBinding, HeaderSpec
from ..services.sort_coordinator import SortCoordinator
from ..utils.html_utils import clean_cell

__all__ = ["ComposedTable", "compose_sortable_table", "extract_header_specs"]

_logger = logging.getLogger(__name__)


@dataclass
class ComposedTable:
    markup: str
    binding: BindingExpression
    header_binding: HeaderBinding


def extract_header_specs(soup: BeautifulSoup) -> List[HeaderSpec]:
    specs: List[HeaderSpec] = []
    for th in soup.find_all("th", attrs={settings.HEADER_ATTRIBUTE: True}):
        specs.append(
            HeaderSpec(
                sort_expression=th[settings.HEADER_ATTRIBUTE],
                sort_default=th.get(settings.SORT_DEFAULT_ATTRIBUTE),
                label=clean_cell(th.get_text()),
            )
        )
    return specs


def compose_sortable_table(
    html: str,
    *,
    row_attribute: str = settings.ROW_BINDING_ATTRIBUTE,
    order_filter: OrderFilter | None = None,
    coordinator: SortCoordinator | None = None,
    bus: EventBus | None = None,
) -> ComposedTable:
    """Rewrite the row binding and bind headers for one table.

    Raises:
        MissingRowBindingError: no `<tr>` carries `row_attribute`.
        MalformedBindingError: the row binding is not `item in collection`.
    """
    soup = BeautifulSoup(html, "html.parser")
    row = soup.find("tr", attrs={row_attribute: True})
    if row is None:
        raise MissingRowBindingError(
            f"sortable table should have a tr element with {row_attribute} defined",
            context={"attribute": row_attribute},
        )
    binding = BindingExpression.parse(row[row_attribute]).with_ordering(order_filter)
    row[row_attribute] = binding.render()
    headers = extract_header_specs(soup)
    _logger.debug(
        "composed sortable table: %d headers, binding %r", len(headers), row[row_attribute]
    )
    return ComposedTable(
        markup=str(soup),
        binding=binding,
        header_binding=HeaderBinding(headers, coordinator=coordinator, bus=bus),
    )
