"""Opportunities domain: the sales pipeline."""

from __future__ import annotations

from salesbuildr_mcp.domains.base import (
    PAGINATION_PROPERTIES,
    Domain,
    ResourceHandler,
    ToolDescriptor,
)

_STAGES = "prospecting, qualification, proposal, negotiation, closed-won, closed-lost"


def _opportunity_fields(title: str, stage: str, notes: str) -> dict:
    return {
        "title": {"type": "string", "description": title},
        "companyId": {"type": "string", "description": "Associated company ID"},
        "contactId": {"type": "string", "description": "Primary contact ID"},
        "value": {"type": "number", "description": "Estimated deal value in dollars"},
        "stage": {"type": "string", "description": stage},
        "probability": {
            "type": "number",
            "description": "Win probability as a percentage (0-100)",
        },
        "expectedCloseDate": {
            "type": "string",
            "description": "Expected close date in ISO 8601 format (YYYY-MM-DD)",
        },
        "notes": {"type": "string", "description": notes},
    }


TOOLS = [
    ToolDescriptor(
        name="salesbuildr_opportunities_list",
        description=(
            "Search and list sales opportunities in SalesBuildr. Returns paginated "
            "results with opportunity details including title, value, stage, and "
            "probability."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter opportunities by title",
                },
                **PAGINATION_PROPERTIES,
            },
        },
    ),
    ToolDescriptor(
        name="salesbuildr_opportunities_get",
        description=(
            "Get detailed information about a specific opportunity by its ID. Returns "
            "full opportunity details including pipeline stage, value, and associated "
            "contacts."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The unique opportunity ID"}
            },
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_opportunities_create",
        description=(
            "Create a new sales opportunity in SalesBuildr. Title is required, "
            "all other fields are optional."
        ),
        input_schema={
            "type": "object",
            "properties": _opportunity_fields(
                "Opportunity title (required)",
                f"Pipeline stage (e.g., {_STAGES})",
                "Additional notes about the opportunity",
            ),
            "required": ["title"],
        },
    ),
    ToolDescriptor(
        name="salesbuildr_opportunities_update",
        description=(
            "Update an existing opportunity in SalesBuildr. "
            "Provide the opportunity ID and any fields to update."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "The unique opportunity ID (required)",
                },
                **_opportunity_fields("Opportunity title", "Pipeline stage", "Additional notes"),
            },
            "required": ["id"],
        },
    ),
]

DOMAIN = Domain(
    id="opportunities",
    label="Opportunity",
    description="Sales pipeline - search, create, update opportunities",
    tools=TOOLS,
    handler=ResourceHandler("opportunities", "Opportunity"),
)
