"""PDF generation for rental receipts."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from car_rental.config import PDF_ISSUER, PT_BR, LocaleConfig, PdfIssuerInfo
from car_rental.domain.models import CarCategory, Transaction
from car_rental.utils.formatting import format_short_date

RECEIPT_TITLE = "RECIBO DE LOCAÇÃO DE VEÍCULO"

RECEIPT_TERMS = (
    "O cliente se responsabiliza pela guarda e conservação do veículo durante o "
    "período da locação, devendo devolvê-lo abastecido e sem danos até a data de "
    "devolução indicada. Atrasos e avarias serão cobrados à parte."
)


def sanitize_filename(value: str) -> str:
    """Normalize text to be safe for filenames."""
    cleaned = "_".join(value.strip().split())
    cleaned = re.sub(r"[^A-Za-z0-9_-]", "", cleaned)
    return cleaned or "Cliente"


def build_receipt_filename(customer_name: str) -> str:
    return f"{sanitize_filename(customer_name)}_Recibo.pdf"


def _yes_no(value: bool) -> str:
    return "Sim" if value else "Não"


def generate_receipt_pdf(
    transaction: Transaction,
    output_path: Path,
    *,
    issuer: PdfIssuerInfo = PDF_ISSUER,
    number_of_days: Optional[int] = None,
    category: Optional[CarCategory] = None,
    locale: LocaleConfig = PT_BR,
) -> Path:
    """Render ``transaction`` as a one page PDF receipt and return its path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        rightMargin=20 * mm,
        leftMargin=20 * mm,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
        title=RECEIPT_TITLE,
        author=issuer.name,
    )

    styles = getSampleStyleSheet()
    styles.add(
        ParagraphStyle(
            name="SectionTitle",
            parent=styles["Heading3"],
            spaceBefore=12,
            spaceAfter=6,
        )
    )
    styles.add(
        ParagraphStyle(
            name="SmallText",
            parent=styles["Normal"],
            fontSize=9,
            leading=12,
        )
    )

    customer = transaction.customer
    car = transaction.car

    elements: list[object] = []
    elements.append(Paragraph(f"<b>{customer.name}</b>", styles["Title"]))
    elements.append(Paragraph(RECEIPT_TITLE, styles["Heading2"]))
    elements.append(Spacer(1, 8))

    issuer_lines = [
        f"<b>Responsável:</b> {issuer.name}",
        f"<b>Contato:</b> {issuer.phone}",
        f"<b>Documento:</b> {issuer.document}",
        f"<b>Endereço:</b> {issuer.address}",
    ]
    elements.append(Paragraph("<br/>".join(issuer_lines), styles["Normal"]))
    elements.append(Spacer(1, 10))

    customer_lines = [
        "<b>Cliente</b>",
        f"Nome: {customer.name}",
        f"Idade: {customer.age}",
        f"Código: {customer.id}",
    ]
    elements.append(Paragraph("<br/>".join(customer_lines), styles["Normal"]))
    elements.append(Spacer(1, 10))

    car_rows = [
        ["Veículo", car.name],
        ["Ano", str(car.release_year)],
        ["Disponível", _yes_no(car.available)],
        ["Combustível", _yes_no(car.gas_available)],
        ["Código", car.id],
    ]
    if category is not None:
        car_rows.insert(1, ["Categoria", category.name])
    car_table = Table(car_rows, colWidths=[40 * mm, 120 * mm])
    car_table.setStyle(
        TableStyle(
            [
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ]
        )
    )
    elements.append(Paragraph("Dados do veículo", styles["SectionTitle"]))
    elements.append(car_table)
    elements.append(Spacer(1, 12))

    value_rows = [["Devolução", transaction.due_date]]
    if number_of_days is not None:
        value_rows.append(["Diárias", str(number_of_days)])
    value_rows.append(["Total", transaction.amount])
    values_table = Table(value_rows, colWidths=[40 * mm, 60 * mm])
    values_table.setStyle(
        TableStyle(
            [
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("BACKGROUND", (0, -1), (-1, -1), colors.whitesmoke),
            ]
        )
    )
    elements.append(Paragraph("Valores", styles["SectionTitle"]))
    elements.append(values_table)
    elements.append(Spacer(1, 12))

    elements.append(Paragraph("Termos", styles["SectionTitle"]))
    elements.append(Paragraph(RECEIPT_TERMS, styles["SmallText"]))
    elements.append(Spacer(1, 18))

    signature_table = Table(
        [
            ["Responsável", "Cliente"],
            ["_____________________________", "_____________________________"],
        ],
        colWidths=[80 * mm, 80 * mm],
    )
    signature_table.setStyle(
        TableStyle(
            [
                ("ALIGN", (0, 0), (-1, -1), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    elements.append(signature_table)

    now = datetime.now()
    footer = (
        f"{issuer.name} - gerado em {format_short_date(now.date(), locale)} "
        f"{now.strftime('%H:%M')}"
    )
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(footer, styles["SmallText"]))

    doc.build(elements)
    return output_path
