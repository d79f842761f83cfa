"""Prompt templates sent to the generative model.

Templates are plain ``str.format`` strings with two inputs: the user's address
and a JSON description of the reply shape. Keeping the schema text an explicit
argument means the templates don't care how that description was produced.
"""

import json
from typing import Any

RERA_LISTINGS_TEMPLATE = """\
You are a real estate research assistant for India.
Find RERA-approved residential projects near the following location.

Address: {address}

Respond ONLY with valid JSON, no commentary, matching this JSON schema:
{schema}

Each listing must have "project_name", "developer", "details" and
"source_url" (a link to the RERA registration or project page).
Return an empty "listings" array if you cannot find any.
"""

VALUATION_REPORT_TEMPLATE = """\
You are a real estate valuation analyst.
Produce a hedonic valuation report for the property at the following location.

Address: {address}

Respond ONLY with valid JSON, no commentary, matching this JSON schema:
{schema}

"fair_value_estimate" is a human-readable price range in local currency.
"hedonic_analysis" scores each value driver (location, connectivity,
amenities, safety, infrastructure, ...) from 0 to 5 with a one-line
justification. "sources" lists URLs you relied on.
"""

def describe_schema(json_schema: dict[str, Any]) -> str:
    """Serialize a JSON schema dict into the text embedded in a prompt."""
    return json.dumps(json_schema, indent=2, sort_keys=True)

def render_prompt(template: str, address: str, schema_description: str) -> str:
    """Fill a template. Same inputs always give the same prompt."""
    return template.format(address=address, schema=schema_description)
