"""Contacts domain: people attached to companies."""

from __future__ import annotations

from salesbuildr_mcp.domains.base import (
    PAGINATION_PROPERTIES,
    Domain,
    ResourceHandler,
    ToolDescriptor,
)


def _contact_fields(first: str, last: str, notes: str) -> dict:
    return {
        "firstName": {"type": "string", "description": first},
        "lastName": {"type": "string", "description": last},
        "email": {"type": "string", "description": "Email address"},
        "phone": {"type": "string", "description": "Phone number"},
        "title": {"type": "string", "description": "Job title"},
        "companyId": {"type": "string", "description": "Associated company ID"},
        "notes": {"type": "string", "description": notes},
    }


TOOLS = [
    ToolDescriptor(
        name="salesbuildr_contacts_list",
        description=(
            "Search and list contacts in SalesBuildr. Optionally filter by company. "
            "Returns paginated results with contact details including name, email, "
            "phone, and title."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter contacts by name or email",
                },
                "companyId": {
                    "type": "string",
                    "description": "Filter contacts by company ID",
                },
                **PAGINATION_PROPERTIES,
            },
        },
    ),
    ToolDescriptor(
        name="salesbuildr_contacts_get",
        description=(
            "Get detailed information about a specific contact by its ID. Returns full "
            "contact profile including company association."
        ),
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string", "description": "The unique contact ID"}},
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_contacts_create",
        description=(
            "Create a new contact in SalesBuildr. First name and last name are required."
        ),
        input_schema={
            "type": "object",
            "properties": _contact_fields(
                "Contact first name (required)",
                "Contact last name (required)",
                "Additional notes about the contact",
            ),
            "required": ["firstName", "lastName"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_contacts_update",
        description=(
            "Update an existing contact in SalesBuildr. "
            "Provide the contact ID and any fields to update."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The unique contact ID (required)"},
                **_contact_fields("Contact first name", "Contact last name", "Additional notes"),
            },
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_contacts_delete",
        description=(
            "Delete a contact from SalesBuildr by its ID. This action cannot be undone."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The unique contact ID to delete"}
            },
            "required": ["id"],
        },
    ),
]

DOMAIN = Domain(
    id="contacts",
    label="Contact",
    description="Contact management - search, create, update, delete contacts",
    tools=TOOLS,
    handler=ResourceHandler("contacts", "Contact", ("query", "companyId", "from", "size")),
)
