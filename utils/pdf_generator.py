import logging
from datetime import datetime
from io import BytesIO
from typing import Any, List, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

class PDFGenerator:
    def __init__(self, pagesize=A4, margin: float = 30):
        self.pagesize = pagesize
        self.margin = margin
        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            'ReportTitle',
            parent=styles['Title'],
            fontSize=16,
            spaceAfter=12
        )
        self.cell_style = ParagraphStyle(
            'ReportCell',
            parent=styles['Normal'],
            fontName='Helvetica',
            fontSize=8,
            leading=10
        )

    def _cell(self, value: Any):
        if value is None:
            return ""
        if isinstance(value, datetime):
            return value.strftime("%Y-%m-%d %H:%M")
        if isinstance(value, str):
            return Paragraph(value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;"), self.cell_style)
        return str(value)

    def create_table_pdf(
        self,
        title: str,
        headers: Sequence[str],
        rows: List[Sequence[Any]],
        col_widths: Sequence[float],
    ) -> bytes:
        """
        Render a titled table. Column widths are fixed; the header row repeats
        on every page and rows flow onto new pages when space runs out.
        """
        buffer = BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=self.pagesize,
                rightMargin=self.margin,
                leftMargin=self.margin,
                topMargin=self.margin,
                bottomMargin=self.margin,
                title=title
            )

            data = [list(headers)]
            for row in rows:
                data.append([self._cell(value) for value in row])

            table = Table(data, colWidths=list(col_widths), repeatRows=1)
            table.setStyle(TableStyle([
                ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
                ('FONTSIZE', (0, 0), (-1, -1), 8),
                ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
                ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
                ('LINEBELOW', (0, 0), (-1, 0), 1, colors.black),
                ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
            ]))

            elements = [
                Paragraph(title, self.title_style),
                Spacer(1, 12),
                table,
            ]

            def add_page_number(canvas, doc):
                canvas.setFont('Helvetica', 8)
                canvas.drawRightString(
                    self.pagesize[0] - self.margin,
                    self.margin / 2,
                    f"Page {canvas.getPageNumber()}"
                )

            doc.build(elements, onFirstPage=add_page_number, onLaterPages=add_page_number)
            return buffer.getvalue()

        except Exception as e:
            logger.error(f"Error creating PDF: {str(e)}")
            raise
        finally:
            buffer.close()
