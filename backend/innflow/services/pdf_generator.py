"""
PDF Generator Service for InnFlow.

Generates printable cash-up statements (daily register reconciliation)
for the front desk file.
"""

import io
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable
)


class PDFGenerator:
    """Generates cash-up statements."""

    def __init__(self, currency_symbol: str = "R"):
        self.currency_symbol = currency_symbol
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Add custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='StatementTitle',
            parent=self.styles['Heading1'],
            fontSize=22,
            spaceAfter=24,
            alignment=TA_CENTER,
            textColor=colors.HexColor('#0F172A'),
        ))
        self.styles.add(ParagraphStyle(
            name='StatementSubtitle',
            parent=self.styles['Normal'],
            fontSize=11,
            spaceAfter=16,
            alignment=TA_CENTER,
            textColor=colors.HexColor('#334155'),
        ))
        self.styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=self.styles['Heading2'],
            fontSize=13,
            spaceBefore=16,
            spaceAfter=8,
            textColor=colors.HexColor('#0F172A'),
        ))
        self.styles.add(ParagraphStyle(
            name='Footer',
            parent=self.styles['Normal'],
            fontSize=8,
            textColor=colors.HexColor('#888888'),
            alignment=TA_CENTER,
            spaceBefore=20,
        ))

    def _money(self, amount: Any) -> str:
        return f"{self.currency_symbol}{Decimal(str(amount)):,.2f}"

    def generate_cash_up_statement(self, property_name: str, record: Dict[str, Any]) -> bytes:
        """
        Generate a one-page cash-up statement.

        Args:
            property_name: Heading shown on the statement
            record: Cash-up fields (date, cash, card, eft, total, notes, reconciled_by)

        Returns:
            PDF bytes
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=0.75*inch,
            leftMargin=0.75*inch,
            topMargin=0.75*inch,
            bottomMargin=0.75*inch,
            title=f"Cash-up {record.get('date')}",
        )

        story = []
        story.append(Paragraph(escape(property_name), self.styles['StatementTitle']))
        story.append(Paragraph(f"Register Cash-Up - {record.get('date')}", self.styles['StatementSubtitle']))

        story.append(Paragraph("TAKINGS", self.styles['SectionHeader']))
        story.append(HRFlowable(width="100%", thickness=1, color=colors.HexColor('#e0e0e0')))

        takings = [
            ["Channel", "Amount"],
            ["Cash", self._money(record.get("cash", 0))],
            ["Card", self._money(record.get("card", 0))],
            ["EFT", self._money(record.get("eft", 0))],
            ["Grand Total", self._money(record.get("total", 0))],
        ]
        table = Table(takings, colWidths=[3*inch, 2.5*inch])
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#0F172A')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#e0e0e0')),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 8),
            ('TOPPADDING', (0, 0), (-1, -1), 8),
        ]))
        story.append(table)
        story.append(Spacer(1, 0.25*inch))

        story.append(Paragraph("NOTES", self.styles['SectionHeader']))
        story.append(HRFlowable(width="100%", thickness=1, color=colors.HexColor('#e0e0e0')))
        story.append(Paragraph(escape(record.get("notes") or "None"), self.styles['Normal']))
        story.append(Spacer(1, 0.25*inch))
        story.append(Paragraph(f"Reconciled by: {escape(record.get('reconciled_by', 'N/A'))}", self.styles['Normal']))

        story.append(Paragraph(
            f"Generated {datetime.utcnow().strftime('%Y-%m-%d %H:%M UTC')}",
            self.styles['Footer'],
        ))

        doc.build(story)
        return buffer.getvalue()
