"""Companies domain: account search and CRUD."""

from __future__ import annotations

from salesbuildr_mcp.domains.base import (
    PAGINATION_PROPERTIES,
    Domain,
    ResourceHandler,
    ToolDescriptor,
)


def _company_fields(name_description: str, notes_description: str) -> dict:
    return {
        "name": {"type": "string", "description": name_description},
        "domain": {"type": "string", "description": "Company domain name (e.g., example.com)"},
        "address": {"type": "string", "description": "Street address"},
        "city": {"type": "string", "description": "City"},
        "state": {"type": "string", "description": "State or province"},
        "zip": {"type": "string", "description": "ZIP or postal code"},
        "country": {"type": "string", "description": "Country"},
        "phone": {"type": "string", "description": "Phone number"},
        "website": {"type": "string", "description": "Company website URL"},
        "notes": {"type": "string", "description": notes_description},
    }


TOOLS = [
    ToolDescriptor(
        name="salesbuildr_companies_list",
        description=(
            "Search and list companies in SalesBuildr. Returns paginated results with "
            "company details including name, domain, address, and contact info."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter companies by name or domain",
                },
                **PAGINATION_PROPERTIES,
            },
        },
    ),
    ToolDescriptor(
        name="salesbuildr_companies_get",
        description=(
            "Get detailed information about a specific company by its ID. Returns full "
            "company profile including address, contact info, and metadata."
        ),
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string", "description": "The unique company ID"}},
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_companies_create",
        description=(
            "Create a new company in SalesBuildr. Only name is required, "
            "all other fields are optional."
        ),
        input_schema={
            "type": "object",
            "properties": _company_fields(
                "Company name (required)", "Additional notes about the company"
            ),
            "required": ["name"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_companies_update",
        description=(
            "Update an existing company in SalesBuildr. "
            "Provide the company ID and any fields to update."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The unique company ID (required)"},
                **_company_fields("Company name", "Additional notes"),
            },
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_companies_delete",
        description=(
            "Delete a company from SalesBuildr by its ID. This action cannot be undone."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The unique company ID to delete"}
            },
            "required": ["id"],
        },
    ),
]

DOMAIN = Domain(
    id="companies",
    label="Company",
    description="Company/account management - search, create, update, delete companies",
    tools=TOOLS,
    handler=ResourceHandler("companies", "Company"),
)
