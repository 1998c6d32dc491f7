"""Streaming response example with tool calls."""
from claude_bridge import ClaudeClient, ToolCallResult

WEATHER_TOOL = {
    "name": "get_weather",
    "description": "Current weather for a city",
    "input_schema": {
        "type": "object",
        "properties": {"city": {"type": "string"}},
        "required": ["city"],
    },
}

with ClaudeClient() as client:
    print("Streaming response:")
    for chunk in client.stream(
        [{"role": "user", "content": "What's the weather in Berlin and Munich?"}],
        model="claude-sonnet-4-5",
        tools=[WEATHER_TOOL],
    ):
        if isinstance(chunk, ToolCallResult):
            for call in chunk.content:
                print(f"\n-> {call.name}({call.arguments})")
        else:
            print(chunk, end="", flush=True)
    print()  # newline at end
