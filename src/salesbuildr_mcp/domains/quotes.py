"""Quotes domain: quotes with nested line items."""

from __future__ import annotations

from salesbuildr_mcp.domains.base import (
    PAGINATION_PROPERTIES,
    Domain,
    ResourceHandler,
    ToolDescriptor,
)

LINE_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "productId": {
            "type": "string",
            "description": "Product ID from the catalog (optional)",
        },
        "name": {"type": "string", "description": "Line item name (required)"},
        "description": {"type": "string", "description": "Line item description"},
        "quantity": {"type": "number", "description": "Quantity (required, default: 1)"},
        "unitPrice": {"type": "number", "description": "Unit price in dollars (required)"},
        "recurringPrice": {
            "type": "number",
            "description": "Recurring price per billing cycle",
        },
        "billingCycle": {
            "type": "string",
            "description": "Billing cycle for recurring items (monthly, quarterly, annually)",
        },
        "discount": {"type": "number", "description": "Discount percentage (0-100)"},
    },
    "required": ["name", "quantity", "unitPrice"],
}

TOOLS = [
    ToolDescriptor(
        name="salesbuildr_quotes_list",
        description=(
            "Search and list quotes in SalesBuildr. Optionally filter by company or "
            "opportunity. Returns paginated results with quote details."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter quotes by title",
                },
                "companyId": {"type": "string", "description": "Filter quotes by company ID"},
                "opportunityId": {
                    "type": "string",
                    "description": "Filter quotes by opportunity ID",
                },
                **PAGINATION_PROPERTIES,
            },
        },
    ),
    ToolDescriptor(
        name="salesbuildr_quotes_get",
        description=(
            "Get detailed information about a specific quote by its ID. Returns full "
            "quote details including line items, pricing, and status."
        ),
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string", "description": "The unique quote ID"}},
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_quotes_create",
        description=(
            "Create a new quote in SalesBuildr. Title is required. Optionally associate "
            "with a company, contact, and opportunity, and include line items."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Quote title (required)"},
                "companyId": {"type": "string", "description": "Associated company ID"},
                "contactId": {"type": "string", "description": "Associated contact ID"},
                "opportunityId": {
                    "type": "string",
                    "description": "Associated opportunity ID",
                },
                "notes": {"type": "string", "description": "Additional notes for the quote"},
                "validUntil": {
                    "type": "string",
                    "description": "Quote expiration date in ISO 8601 format (YYYY-MM-DD)",
                },
                "items": {
                    "type": "array",
                    "description": "Line items for the quote",
                    "items": LINE_ITEM_SCHEMA,
                },
            },
            "required": ["title"],
        },
    ),
]

DOMAIN = Domain(
    id="quotes",
    label="Quote",
    description="Quote management - search, create, view quotes with line items",
    tools=TOOLS,
    handler=ResourceHandler(
        "quotes", "Quote", ("query", "companyId", "opportunityId", "from", "size")
    ),
)
