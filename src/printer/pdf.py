"""Render puzzle/solution pairs into a landscape PDF with matplotlib."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence, Tuple

from project_config import get_section

INCH_PER_CM = 0.3937007874

Pair = Tuple[Sequence[int], Sequence[int]]


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class PdfLayout:
    """Page geometry and styling, in centimetres where applicable."""

    rows: int = 2
    cols: int = 2
    width_cm: float = 29.7
    height_cm: float = 21.0
    margin_cm: float = 2.0
    gap_cm: float = 1.5
    footer_offset_cm: float = 1.0
    font_scale: float = 0.65
    given_color: str = "black"
    filled_color: str = "tab:blue"

    @property
    def per_page(self) -> int:
        return max(1, self.rows * self.cols)

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None = None) -> "PdfLayout":
        pdf_cfg = _as_dict(get_section("pdf", default={}) if section is None else section)
        layout = _as_dict(pdf_cfg.get("layout"))
        page = _as_dict(pdf_cfg.get("page"))
        rendering = _as_dict(pdf_cfg.get("rendering"))
        defaults = cls()
        return cls(
            rows=int(layout.get("rows", defaults.rows)),
            cols=int(layout.get("cols", defaults.cols)),
            width_cm=float(page.get("width_cm", defaults.width_cm)),
            height_cm=float(page.get("height_cm", defaults.height_cm)),
            margin_cm=float(page.get("margin_cm", defaults.margin_cm)),
            gap_cm=float(page.get("gap_cm", defaults.gap_cm)),
            footer_offset_cm=float(page.get("footer_offset_cm", defaults.footer_offset_cm)),
            font_scale=float(rendering.get("font_scale_factor", defaults.font_scale)),
            given_color=str(rendering.get("given_color", defaults.given_color)),
            filled_color=str(rendering.get("filled_color", defaults.filled_color)),
        )


def _draw_grid(ax, puzzle: Sequence[int], solution: Sequence[int], layout: PdfLayout, size_in: float) -> None:
    ax.tick_params(axis="both", which="both", bottom=False, top=False, left=False, right=False,
                   labelbottom=False, labelleft=False)
    for idx in range(10):
        linewidth = 1.0 if idx % 3 else 2.5
        ax.axvline(idx / 9, color="k", linewidth=linewidth)
        ax.axhline(idx / 9, color="k", linewidth=linewidth)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")

    font_size = max(1, int(layout.font_scale * size_in * 72 / 9))
    for cell in range(81):
        value = solution[cell] or puzzle[cell]
        if not value:
            continue
        r, c = divmod(cell, 9)
        color = layout.given_color if puzzle[cell] else layout.filled_color
        ax.text((c + 0.5) / 9, 1 - (r + 0.5) / 9, str(value),
                ha="center", va="center", fontsize=font_size, color=color)


def render_pdf(pairs: Sequence[Pair], out_path: str | Path, *, layout: PdfLayout | None = None) -> int:
    """Write ``pairs`` to ``out_path``, one grid per slot, and return the page count.

    Cells given in the puzzle are drawn in ``given_color``; cells the solver
    filled in use ``filled_color``.  An unsolved entry shows only its givens.
    """

    import matplotlib

    matplotlib.use("Agg")
    from matplotlib.backends.backend_pdf import PdfPages
    import matplotlib.pyplot as plt

    layout = layout or PdfLayout.from_config()
    out_path = Path(out_path)
    pages = max(1, math.ceil(len(pairs) / layout.per_page))

    page_w_in = layout.width_cm * INCH_PER_CM
    page_h_in = layout.height_cm * INCH_PER_CM
    margin_in = layout.margin_cm * INCH_PER_CM
    gap_in = layout.gap_cm * INCH_PER_CM

    avail_w = page_w_in - 2 * margin_in - gap_in * (layout.cols - 1)
    avail_h = page_h_in - 2 * margin_in - gap_in * (layout.rows - 1)
    grid_size = min(avail_w / max(1, layout.cols), avail_h / max(1, layout.rows))
    footer_y = (layout.footer_offset_cm * INCH_PER_CM) / page_h_in

    with PdfPages(out_path) as pdf:
        for page_num in range(pages):
            fig = plt.figure(figsize=(page_w_in, page_h_in))
            start = page_num * layout.per_page
            page_pairs = pairs[start:start + layout.per_page]

            for slot, (puzzle, solution) in enumerate(page_pairs):
                row, col = divmod(slot, layout.cols)
                left = margin_in + col * (grid_size + gap_in)
                bottom = margin_in + (layout.rows - 1 - row) * (grid_size + gap_in)
                ax = fig.add_axes(
                    [left / page_w_in, bottom / page_h_in, grid_size / page_w_in, grid_size / page_h_in],
                    frameon=False,
                )
                _draw_grid(ax, puzzle, solution, layout, grid_size)

            fig.text(
                0.5,
                footer_y,
                f"Puzzles {start + 1}-{start + len(page_pairs)} of {len(pairs)}    page {page_num + 1}/{pages}",
                ha="center",
                va="bottom",
                fontsize=8,
            )
            pdf.savefig(fig)
            plt.close(fig)

    return pages


__all__ = ["PdfLayout", "render_pdf"]
