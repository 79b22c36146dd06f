from decimal import Decimal

SHIPPING_RATE_PER_KG = Decimal("10.0")
GRAMS_PER_KG = Decimal("1000")

# receipt layout
SHIPMENT_HEADER = "** Shipment notice **"
RECEIPT_HEADER = "** Checkout receipt **"
RECEIPT_SEPARATOR = "-" * 22
RECEIPT_FOOTER = "=" * 49
ERROR_PREFIX = "Error: "
