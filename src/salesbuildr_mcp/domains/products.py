"""Products domain: read-only catalog access."""

from __future__ import annotations

from salesbuildr_mcp.domains.base import (
    PAGINATION_PROPERTIES,
    Domain,
    ResourceHandler,
    ToolDescriptor,
)

TOOLS = [
    ToolDescriptor(
        name="salesbuildr_products_list",
        description=(
            "Search and list products in the SalesBuildr catalog. Returns paginated "
            "results with product details including name, SKU, pricing, and category."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter products by name, SKU, or category",
                },
                **PAGINATION_PROPERTIES,
            },
        },
    ),
    ToolDescriptor(
        name="salesbuildr_products_get",
        description=(
            "Get detailed information about a specific product by its ID. Returns full "
            "product details including pricing, description, and vendor info."
        ),
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string", "description": "The unique product ID"}},
            "required": ["id"],
        },
    ),
]

DOMAIN = Domain(
    id="products",
    label="Product",
    description="Product catalog - search and view products with pricing",
    tools=TOOLS,
    handler=ResourceHandler("products", "Product"),
)
