"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from callsheet.extraction.client_base import BaseExtractionClient, UserContent


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed valid extraction JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "production_info": {"title": None, "production_company": None, "shoot_date": None},
        "contacts": [],
        "emergency_contacts": [],
        "locations": [],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_content: UserContent,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_content, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
