"""Wire-level constants shared by the conversion modules."""


class Constants:
    ROLE_SYSTEM = "system"
    ROLE_USER = "user"
    ROLE_ASSISTANT = "assistant"

    CONTENT_TEXT = "text"

    # Namespace an upstream router puts in front of model names
    PROVIDER_PREFIX = "claude-code-cli/"

    PREVIOUS_RESPONSE_OPEN = "<previous_response>"
    PREVIOUS_RESPONSE_CLOSE = "</previous_response>"
