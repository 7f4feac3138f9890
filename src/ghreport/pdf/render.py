"""Draw a planned report layout into PDF bytes with reportlab."""

import io
from typing import Iterable

from reportlab.pdfgen import canvas

from ghreport.errors import PDFError
from ghreport.models import AggregateRecord
from ghreport.pdf.fonts import font_runs
from ghreport.pdf.layout import (
    PAGE_SIZE,
    TITLE,
    TextBlock,
    plan_report_layout,
)


def render_report_pdf(blocks: Iterable[TextBlock], *, title: str = TITLE) -> bytes:
    """Render text blocks onto a single page.

    Each line is drawn as a sequence of font runs, so text outside the base
    font's character set uses the font that covers it.

    Args:
        blocks: Positioned text blocks (see ``plan_report_layout``)
        title: Document title stored in the PDF metadata

    Returns:
        The finished PDF document

    Raises:
        PDFError: If reportlab fails to draw or serialize the page
    """
    buffer = io.BytesIO()
    try:
        pdf = canvas.Canvas(buffer, pagesize=PAGE_SIZE)
        pdf.setTitle(title)

        for block in blocks:
            text = pdf.beginText(block.x, block.y)
            text.setLeading(block.leading)
            text.setFillColorRGB(*block.color)
            for line in block.lines:
                for font_name, chunk in font_runs(line):
                    text.setFont(font_name, block.size, block.leading)
                    text.textOut(chunk)
                text.textLine("")
            pdf.drawText(text)

        pdf.showPage()
        pdf.save()
    except PDFError:
        raise
    except Exception as exc:
        raise PDFError(f"failed to render report: {exc}") from exc

    return buffer.getvalue()


def build_report_pdf(record: AggregateRecord) -> bytes:
    """Lay out and render the report for ``record``.

    Raises:
        PDFError: If layout or rendering fails
    """
    try:
        blocks = plan_report_layout(record)
    except PDFError:
        raise
    except Exception as exc:
        raise PDFError(f"failed to lay out report: {exc}") from exc
    return render_report_pdf(blocks, title=f"{TITLE}: {record.login}")
