"""
Excel manifest generation for a container ship.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from ..config.limits import KG_PER_TONNE
from ..models import GasContainer, LiquidContainer, RefrigeratedContainer

if TYPE_CHECKING:
    from ..models import Container, ContainerShip


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, stripe: bool = True) -> None:
    """Zebra striping and a bold first column."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if stripe and cell.row % 2 == 0:
                cell.fill = stripe_fill


def _container_details(c: "Container") -> str:
    if isinstance(c, RefrigeratedContainer):
        return f"{c.product_type} at {c.temperature:.1f} °C"
    if isinstance(c, LiquidContainer):
        return "Hazardous" if c.is_hazardous else "Non-hazardous"
    if isinstance(c, GasContainer):
        return f"Pressure {c.pressure:.1f}"
    return ""


def _container_rows(ship: "ContainerShip") -> list[dict]:
    return [
        {
            "Serial": c.serial_number,
            "Type": c.kind.name.title(),
            "Height (cm)": c.height,
            "Depth (cm)": c.depth,
            "Tare (kg)": c.tare_weight,
            "Current load (kg)": c.current_load,
            "Max load (kg)": c.max_load,
            "Gross (kg)": c.gross_weight,
            "Details": _container_details(c),
        }
        for c in ship.containers
    ]


def export_manifest_to_excel(filepath: Path, ship: "ContainerShip") -> None:
    """Write a 'Ship Summary' sheet and, when loaded, a 'Containers' sheet."""
    df_summary = pd.DataFrame(
        {
            "Parameter": [
                "Ship",
                "Max speed (kn)",
                "Containers aboard",
                "Max containers",
                "Total weight (t)",
                "Max weight (t)",
                "Remaining weight (t)",
            ],
            "Value": [
                ship.name,
                ship.max_speed,
                ship.container_count,
                ship.max_containers,
                ship.total_weight / KG_PER_TONNE,
                ship.max_weight / KG_PER_TONNE,
                ship.remaining_weight / KG_PER_TONNE,
            ],
        }
    )
    rows = _container_rows(ship)
    df_containers = pd.DataFrame(rows) if rows else None

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Ship Summary", index=False)
        ws_summary = writer.sheets["Ship Summary"]
        ws_summary.column_dimensions["A"].width = 28
        ws_summary.column_dimensions["B"].width = 24
        _style_header(ws_summary)
        _style_body_table(ws_summary)
        ws_summary.freeze_panes = "A2"

        if df_containers is not None:
            df_containers.to_excel(writer, sheet_name="Containers", index=False)
            ws_c = writer.sheets["Containers"]
            ws_c.column_dimensions["A"].width = 14  # Serial
            ws_c.column_dimensions["B"].width = 14  # Type
            ws_c.column_dimensions["I"].width = 28  # Details
            _style_header(ws_c)
            _style_body_table(ws_c)
            ws_c.freeze_panes = "A2"
