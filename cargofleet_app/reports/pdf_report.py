"""
PDF manifest generation for a container ship.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from ..config.limits import KG_PER_TONNE

if TYPE_CHECKING:
    from ..models import ContainerShip


_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
        ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 10),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("BACKGROUND", (0, 1), (-1, -1), "#E7E6E6"),
        ("GRID", (0, 0), (-1, -1), 0.5, "gray"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
    ]
)


def export_manifest_to_pdf(filepath: Path, ship: "ContainerShip") -> None:
    """
    Generate a PDF manifest: ship limits followed by one row per container.
    """
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
    )

    story = []
    story.append(Paragraph(f"cargofleet - Manifest for {ship.name}", title_style))
    story.append(Spacer(1, 0.5 * cm))

    summary = [
        ["Parameter", "Value"],
        ["Max speed (kn)", f"{ship.max_speed:.1f}"],
        ["Containers", f"{ship.container_count} / {ship.max_containers}"],
        ["Total weight (t)", f"{ship.total_weight / KG_PER_TONNE:.3f}"],
        ["Max weight (t)", f"{ship.max_weight / KG_PER_TONNE:.3f}"],
    ]
    table = Table(summary, colWidths=[8 * cm, 6 * cm])
    table.setStyle(_TABLE_STYLE)
    story.append(table)
    story.append(Spacer(1, 0.5 * cm))

    if not ship.containers:
        story.append(Paragraph("No containers aboard.", styles["Normal"]))
    else:
        rows = [["Serial", "Type", "Tare (kg)", "Load (kg)", "Max load (kg)"]]
        for c in ship.containers:
            rows.append([
                c.serial_number,
                c.kind.name.title(),
                f"{c.tare_weight:.1f}",
                f"{c.current_load:.1f}",
                f"{c.max_load:.1f}",
            ])
        containers_table = Table(rows, colWidths=[3.5 * cm, 3 * cm, 3 * cm, 3 * cm, 3 * cm])
        containers_table.setStyle(_TABLE_STYLE)
        story.append(containers_table)

    doc.build(story)
