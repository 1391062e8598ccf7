"""Printable renderings of solved puzzles."""

from .pdf import PdfLayout, render_pdf

__all__ = ["PdfLayout", "render_pdf"]
