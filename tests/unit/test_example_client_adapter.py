import json

from callsheet.extraction.example_client_adapter import ExampleClientAdapter
from callsheet.extraction.parser import parse_extraction


class TestExampleClientAdapter:
    def test_returns_valid_extraction_json(self) -> None:
        adapter = ExampleClientAdapter()
        content = adapter.create_chat_completion(
            model="example",
            temperature=0.0,
            system_prompt="system",
            user_content="user",
            json_schema={"type": "object"},
        )

        result = parse_extraction(json.loads(content))
        assert result.contacts == []
        assert result.production_info.title is None

    def test_ignores_image_content(self) -> None:
        adapter = ExampleClientAdapter()
        content = adapter.create_chat_completion(
            model="example",
            temperature=0.0,
            system_prompt="system",
            user_content=[{"type": "text", "text": "read this"}],
            json_schema={"type": "object"},
        )
        assert json.loads(content) == ExampleClientAdapter.DEFAULT_RESPONSE
