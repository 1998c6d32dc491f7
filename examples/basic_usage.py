"""Basic usage example."""
from claude_bridge import ClaudeClient, ToolCallResult

client = ClaudeClient()  # reads ANTHROPIC_API_KEY

result = client.messages(
    [{"role": "user", "content": "Summarize the Kubernetes operator pattern in two sentences."}],
    model="claude-sonnet-4-5",
)
if isinstance(result, ToolCallResult):
    for call in result.content:
        print(f"{call.name}({call.arguments})")
else:
    print(result.content)
client.close()
