from __future__ import annotations

from typing import Optional

SUPPLIER_EMAIL_TEMPLATE = """Dear [Supplier],

We are looking for a fully furnished apartment on behalf of our client with the following requirements:

- Location: [Postcode]
- Dates: [Start Date] to [End Date]
- Number of people: [Number]
- Pets: [Yes/No]
- Bedrooms required: [Number]
- Special requirements: [List any special requirements]

If you have availability, please share the following information with us within the next 2 hours:

1. Property address
2. Number of bedrooms and bathrooms
3. Floor level (if applicable)
4. Parking availability
5. Pet policy
6. Pricing for the requested dates
7. High-quality images or video of the property

Thank you for your prompt attention to this matter.

Best regards,
{signature}
{company_name}"""


def build_supplier_email(company_name: str, user_name: Optional[str] = None) -> str:
    """Supplier availability request, signed with the user (or a placeholder)."""
    return SUPPLIER_EMAIL_TEMPLATE.format(
        signature=user_name or "[Your Name]",
        company_name=company_name,
    )
