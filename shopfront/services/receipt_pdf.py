from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from shopfront.config import settings
from shopfront.services.checkout import CheckoutResult
from shopfront.utils.formatters import money, plain_number

logger = logging.getLogger(__name__)


def _default_path(now: datetime) -> str:
    os.makedirs(settings.export_dir, exist_ok=True)
    filename = f"receipt_{now.strftime('%Y-%m-%d_%H-%M-%S_%f')}.pdf"
    return os.path.join(settings.export_dir, filename)


def generate_receipt_pdf(result: CheckoutResult, customer_name: str, path: Optional[str] = None) -> str:
    if not result.ok:
        raise ValueError(f"cannot render a receipt for a failed checkout: {result.error}")

    now = datetime.now()
    if path is None:
        path = _default_path(now)
    else:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

    c = canvas.Canvas(path, pagesize=A4)
    w, h = A4

    y = h - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, y, "CHECKOUT RECEIPT")
    y -= 20

    c.setFont("Helvetica", 11)
    c.drawString(40, y, f"Customer: {customer_name}")
    y -= 16
    c.drawString(40, y, f"Date: {now.strftime('%Y-%m-%d %H:%M:%S')}")
    y -= 24

    # header
    c.setFont("Helvetica-Bold", 10)
    c.drawString(40, y, "Item")
    c.drawString(310, y, "Qty")
    c.drawString(360, y, "Price")
    c.drawString(440, y, "Total")
    y -= 10
    c.line(40, y, 550, y)
    y -= 16

    c.setFont("Helvetica", 10)
    for line in result.lines:
        c.drawString(40, y, line.item.name[:45])
        c.drawRightString(340, y, str(line.reserved_quantity))
        c.drawRightString(420, y, money(line.item.unit_price))
        c.drawRightString(550, y, money(line.line_total))
        y -= 14
        if y < 80:
            c.showPage()
            y = h - 50
            c.setFont("Helvetica", 10)

    y -= 10
    c.line(40, y, 550, y)
    y -= 18
    if result.units:
        c.drawString(40, y, f"Shipped: {len(result.units)} unit(s), {plain_number(result.total_weight_kg)} kg")
    c.drawRightString(550, y, f"Subtotal: {money(result.subtotal)}")
    y -= 16
    c.drawRightString(550, y, f"Shipping: {money(result.shipping_fee)}")
    y -= 18
    c.setFont("Helvetica-Bold", 12)
    c.drawRightString(550, y, f"TOTAL: {money(result.total)}")
    y -= 18
    c.setFont("Helvetica", 10)
    c.drawRightString(550, y, f"Balance after payment: {money(result.balance_after)}")

    c.save()
    logger.info(f"Receipt PDF written to {path}")
    return path
