"""Text formats shared by the demos.

These are literal output contracts; tests compare them byte for byte.
"""

from __future__ import annotations

TAX_REPORT_TEMPLATE = (
    "Taxes for {account}.\n"
    "IncomeTax: {income_tax} {currency}, PropertyTax: {property_tax} {currency}\n"
)


def render_tax_report(
    account: str,
    income_tax: int,
    property_tax: int,
    *,
    currency: str = "RUB",
) -> str:
    return TAX_REPORT_TEMPLATE.format(
        account=account,
        income_tax=income_tax,
        property_tax=property_tax,
        currency=currency,
    )


def format_price(value: float) -> str:
    """Format a price the way the menu board shows it: `100`, `150`, `12.5`."""

    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
