"""
Auto Commit Message

Writes commit messages for staged git changes using an OpenAI-compatible
chat-completion API.
"""

__version__ = "1.0.0"

TOOL_NAME = "auto-commit-msg"

# Instruction sent ahead of the diff on every request
DEVELOPER_PROMPT = (
    "You are an assistant that writes concise, conventional commit messages "
    "based on the provided git diff. Return the commit message without any quotes."
)
