"""Guest message template rendering."""

from typing import Any

PLACEHOLDERS = ("{{guest}}", "{{ref}}", "{{property}}", "{{date}}", "{{link}}")


def payment_link(base_url: str, reference: str) -> str:
    return f"{base_url.rstrip('/')}/{reference}"


def render_message(template: str, booking: Any, property_name: str, link: str) -> str:
    """Substitute booking details into a WhatsApp template.

    Each placeholder is replaced literally at its first occurrence only, in
    the fixed order guest, ref, property, date, link. No escaping is applied,
    so text substituted earlier is visible to later replacements.
    """
    values = (
        booking.guest_name,
        booking.reference,
        property_name,
        booking.check_in_date.isoformat(),
        link,
    )
    message = template
    for placeholder, value in zip(PLACEHOLDERS, values):
        message = message.replace(placeholder, value, 1)
    return message
